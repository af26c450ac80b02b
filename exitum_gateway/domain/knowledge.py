"""Keyword knowledge base for the chat assistant"""

from typing import List, Sequence, Tuple

from exitum_gateway.domain.models import KnowledgeSnippet

MIN_KEYWORD_LENGTH = 5

CONTEXT_HEADER = "ИСПОЛЬЗУЙ ЭТУ ИНФОРМАЦИЮ ИЗ БАЗЫ ЗНАНИЙ ДЛЯ ОТВЕТА:"

KNOWLEDGE_BASE: Tuple[KnowledgeSnippet, ...] = (
    KnowledgeSnippet(
        topic="Контактная информация",
        content=(
            "Адвокат Горбунов К.Э. принимает в офисе по адресу: г. Калининград, ул. Октябрьская, д. 8, оф. 502 "
            "(Специальный административный район Остров Октябрьский). Телефон: +7 (909) 776-88-59. "
            "Email: kgorbunov@exitumlaw.ru."
        ),
    ),
    KnowledgeSnippet(
        topic="Образование и статус",
        content=(
            "Константин Горбунов окончил Военный Университет Министерства Обороны РФ в 2004 году с отличием. "
            "Является адвокатом филиала Московской специализированной коллегии адвокатов «Экзитум»."
        ),
    ),
    KnowledgeSnippet(
        topic="Дефолт по облигациям",
        content=(
            "При техническом дефолте эмитенту дается 10 дней на исполнение обязательств. "
            "Мы занимаемся взысканием номинала облигаций и купонного дохода, а также представляем "
            "интересы групп владельцев облигаций (коллективные иски)."
        ),
    ),
    KnowledgeSnippet(
        topic="Банкротство и субсидиарная ответственность",
        content=(
            "Мы сопровождаем процедуры банкротства: включение в реестр требований кредиторов (РТК), "
            "оспаривание сделок должника, привлечение бенефициаров к субсидиарной ответственности."
        ),
    ),
    KnowledgeSnippet(
        topic="Юридическое инвестирование",
        content=(
            "Мы предлагаем формат работы 'Юридическое инвестирование': взыскание денежных средств "
            "за процент от реально полученного (Success Fee). Клиент не несет расходов на старте."
        ),
    ),
    KnowledgeSnippet(
        topic="Услуги",
        content=(
            "Основные практики: корпоративные споры, банкротство эмитентов, споры по облигациям, "
            "защита частного капитала, анализ рисков (Due Diligence)."
        ),
    ),
)


def _matches(snippet: KnowledgeSnippet, lower_query: str) -> bool:
    if snippet.topic.lower() in lower_query:
        return True
    return any(
        len(word) >= MIN_KEYWORD_LENGTH and word in lower_query
        for word in snippet.content.lower().split(" ")
    )


def lookup_context(
    query: str,
    knowledge_base: Sequence[KnowledgeSnippet] = KNOWLEDGE_BASE,
) -> List[KnowledgeSnippet]:
    """
    Select snippets relevant to a visitor's message.

    A snippet matches when the message contains its topic, or any word of its
    content longer than 4 characters (case-insensitive, words split on spaces
    so punctuation stays attached).
    """
    lower_query = query.lower()
    return [snippet for snippet in knowledge_base if _matches(snippet, lower_query)]


def build_context_block(snippets: Sequence[KnowledgeSnippet]) -> str:
    """Render snippets as a prompt section, or "" when nothing matched"""
    if not snippets:
        return ""
    body = "\n---\n".join(snippet.content for snippet in snippets)
    return f"{CONTEXT_HEADER}\n{body}\n"

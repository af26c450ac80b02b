"""Unit tests for knowledge lookup, prompt assembly and phone extraction"""

from exitum_gateway.domain.knowledge import CONTEXT_HEADER, KNOWLEDGE_BASE, build_context_block, lookup_context
from exitum_gateway.domain.prompts import OFF_TOPIC_LINE, build_system_instruction, chat_lead_issue
from exitum_gateway.utils.phone_utils import extract_phone


def test_lookup_context_by_topic_case_insensitive():
    """Test snippet matches when the message contains its topic"""
    snippets = lookup_context("Какие у вас УСЛУГИ?")
    assert [s.topic for s in snippets] == ["Услуги"]


def test_lookup_context_by_content_keyword():
    """Test snippet matches on a long word from its content"""
    snippets = lookup_context("Что делать при дефолте облигаций?")
    assert [s.topic for s in snippets] == ["Дефолт по облигациям"]


def test_lookup_context_ignores_short_words():
    """Test words of 4 characters or fewer never match"""
    assert lookup_context("на") == []
    assert lookup_context("Hello there") == []


def test_lookup_context_multiple_snippets_keep_order():
    """Test results follow knowledge base order"""
    snippets = lookup_context("Контактная информация и услуги")
    assert [s.topic for s in snippets] == ["Контактная информация", "Услуги"]


def test_build_context_block():
    """Test prompt section rendering"""
    assert build_context_block([]) == ""

    block = build_context_block(KNOWLEDGE_BASE[:2])
    assert block == (
        f"{CONTEXT_HEADER}\n{KNOWLEDGE_BASE[0].content}\n---\n{KNOWLEDGE_BASE[1].content}\n"
    )


def test_build_system_instruction_context_or_guard():
    """Test context replaces the off-topic guard when present"""
    assert build_system_instruction("").endswith(OFF_TOPIC_LINE)

    block = build_context_block(KNOWLEDGE_BASE[:1])
    instruction = build_system_instruction(block)
    assert KNOWLEDGE_BASE[0].content in instruction
    assert OFF_TOPIC_LINE not in instruction


def test_chat_lead_issue_truncates_message():
    """Test lead issue keeps the first 50 characters"""
    message = "x" * 80
    assert chat_lead_issue(message) == "Указан в чате: " + "x" * 50 + "..."


def test_extract_phone_formats():
    """Test Russian phone formats with and without separators"""
    assert extract_phone("Позвоните: +7 (909) 776-88-59") == "+7 (909) 776-88-59"
    assert extract_phone("8 909 776 88 59") == "8 909 776 88 59"
    assert extract_phone("мой номер 89097768859.") == "89097768859"
    assert extract_phone("Мой номер 8-909-776-88-59, звоните") == "8-909-776-88-59"


def test_extract_phone_none():
    """Test messages without a phone number"""
    assert extract_phone("Нужна консультация по банкротству") is None
    assert extract_phone("код 12345") is None

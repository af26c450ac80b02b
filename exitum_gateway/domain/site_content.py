"""Editable site texts and images with their defaults"""

from typing import Dict, Tuple

SITE_CONTENT_FIELDS: Tuple[str, ...] = (
    "logo_text",
    "hero_image",
    "profile_image",
    "hero_title",
    "hero_subtitle",
    "about_text",
    "education",
    "status",
    "stats_experience",
    "stats_recovered",
    "expertise_text",
)

DEFAULT_SITE_CONTENT: Dict[str, str] = {
    "logo_text": "Горбунов Константин. Адвокат",
    "hero_image": "https://images.unsplash.com/photo-1478760329108-5c3ed9d495a0?q=80&w=1974&auto=format&fit=crop",
    "profile_image": "https://images.unsplash.com/photo-1556157382-97eda2d62296?q=80&w=1470&auto=format&fit=crop",
    "hero_title": "Защита активов в эпоху перемен",
    "hero_subtitle": "Специализация: корпоративные споры, банкротство, облигационные споры.",
    "about_text": (
        "Я — Константин Горбунов, адвокат МСКА «Экзитум». Работаю в точке, где пересекаются право, "
        "экономика и стратегия. Моя задача — не просто выиграть спор, но и создать работающий механизм "
        "защиты капитала. За последние годы я сформировал практику, ориентированную на облигационные "
        "споры, банкротства, корпоративные конфликты и судебные механизмы возврата активов."
    ),
    "education": "Военный Университет Министерства Обороны РФ 2004 год (диплом с отличием)",
    "status": "Адвокат филиала Московской специализированной коллегии адвокатов «Экзитум»",
    "stats_experience": "20+",
    "stats_recovered": "2.5 млрд ₽",
    "expertise_text": (
        "Специализация: корпоративные споры, банкротство, облигационные споры. Защита активов, "
        "минимизация рисков и выстраивание стратегии взыскания, которая приносит реальный результат."
    ),
}

EXCERPT_CHARS = 100


def default_excerpt(content: str) -> str:
    """Article excerpt when the author leaves it blank"""
    return content[:EXCERPT_CHARS] + "..."

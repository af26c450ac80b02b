"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class BondSchedule:
    """Fixed-rate coupon bond with bullet principal repayment"""

    face_value: float
    annual_coupon_rate_percent: float
    payments_per_year: int  # 2, 4 or 12 on the site, any positive integer here
    term_years: int


@dataclass(frozen=True)
class ComparisonResult:
    """NPV of original vs restructured bond terms under one discount rate"""

    original_npv: int
    restructured_npv: int
    delta: int
    delta_percent: Optional[float]  # None when original_npv == 0


class LeadStatus(str, Enum):
    """Back-office pipeline stage of a lead"""

    NEW = "new"
    ANALYSIS = "analysis"
    IN_PROGRESS = "in_progress"
    ARCHIVED = "archived"


class LeadSource(str, Enum):
    FORM = "form"
    CHAT = "chat"


@dataclass(frozen=True)
class KnowledgeSnippet:
    """Canned fact the chat assistant may cite"""

    topic: str
    content: str


@dataclass
class ChatReply:
    """Assistant answer plus lead-capture outcome"""

    reply: str
    lead_captured: bool = False
    lead_id: Optional[str] = None
    context_topics: List[str] = field(default_factory=list)

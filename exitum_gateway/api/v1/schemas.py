"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
import uuid
from datetime import datetime
from typing import List, Optional

from exitum_gateway.domain.models import BondSchedule, LeadSource, LeadStatus


class CourtFeeRequest(BaseModel):
    """Request body for POST /v1/calculators/court-fee"""

    claim_amount: float = Field(..., ge=0, allow_inf_nan=False, description="Claim amount in rubles")


class CourtFeeResponse(BaseModel):
    fee: int


class BondScheduleSchema(BaseModel):
    """Fixed-rate bullet bond terms"""

    face_value: float = Field(..., gt=0, allow_inf_nan=False, description="Face value in rubles")
    annual_coupon_rate_percent: float = Field(..., allow_inf_nan=False)
    payments_per_year: int = Field(..., ge=0, le=365, description="Coupon payments per year (2, 4 or 12 on the site)")
    term_years: int = Field(..., ge=0, le=100)

    def to_domain(self) -> BondSchedule:
        return BondSchedule(
            face_value=self.face_value,
            annual_coupon_rate_percent=self.annual_coupon_rate_percent,
            payments_per_year=self.payments_per_year,
            term_years=self.term_years,
        )


class BondNPVRequest(BaseModel):
    """Request body for POST /v1/calculators/bond-npv"""

    schedule: BondScheduleSchema
    discount_rate_percent: float = Field(..., allow_inf_nan=False)


class BondNPVResponse(BaseModel):
    npv: int


class RestructuringRequest(BaseModel):
    """Request body for POST /v1/calculators/bond-restructuring"""

    original_schedule: BondScheduleSchema
    restructured_schedule: BondScheduleSchema
    discount_rate_percent: float = Field(..., allow_inf_nan=False, description="Annual rate at initial placement")


class RestructuringResponse(BaseModel):
    """NPV comparison; delta_percent is null when the original NPV is zero"""

    original_npv: int
    restructured_npv: int
    delta: int
    delta_percent: Optional[float] = None


class LeadCreateRequest(BaseModel):
    """Contact form submission"""

    name: str = Field(..., min_length=1, max_length=200)
    phone: str = Field(..., min_length=5, max_length=50)
    issue: str = Field("", max_length=5000)


class LeadStatusUpdate(BaseModel):
    status: LeadStatus


class LeadSchema(BaseModel):
    """Single lead in the back-office list"""

    lead_id: str
    name: str
    phone: str
    issue: str
    status: LeadStatus
    source: LeadSource
    created_at: str


class LeadListResponse(BaseModel):
    leads: List[LeadSchema]


class ChatRequest(BaseModel):
    """Request body for POST /v1/chat"""

    message: str = Field(..., min_length=1, max_length=4000)


class ChatResponse(BaseModel):
    reply: str
    lead_captured: bool
    lead_id: Optional[str] = None
    context_topics: List[str]


# Images may be uploaded as data URLs; 500 KB files stay under this after base64
IMAGE_MAX_CHARS = 700_000


class ArticleRequest(BaseModel):
    """Request body for creating or editing an article"""

    title: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1, description="Article text, Markdown supported")
    excerpt: Optional[str] = Field(None, max_length=2000, description="Defaults to the first 100 characters")
    image: Optional[str] = Field(None, max_length=IMAGE_MAX_CHARS, description="Cover image URL")
    published_at: Optional[datetime] = Field(None, description="Ignored on edit")


class ArticleSchema(BaseModel):
    article_id: str
    title: str
    excerpt: str
    content: str
    image: Optional[str] = None
    published_at: str


class ArticleListResponse(BaseModel):
    articles: List[ArticleSchema]


class SiteContentSchema(BaseModel):
    """Editable texts and images of the public site"""

    logo_text: str
    hero_image: str = Field(..., max_length=IMAGE_MAX_CHARS)
    profile_image: str = Field(..., max_length=IMAGE_MAX_CHARS)
    hero_title: str
    hero_subtitle: str
    about_text: str
    education: str
    status: str
    stats_experience: str
    stats_recovered: str
    expertise_text: str


class SiteContentUpdate(BaseModel):
    """Partial update: only provided fields change"""

    logo_text: Optional[str] = None
    hero_image: Optional[str] = Field(None, max_length=IMAGE_MAX_CHARS)
    profile_image: Optional[str] = Field(None, max_length=IMAGE_MAX_CHARS)
    hero_title: Optional[str] = None
    hero_subtitle: Optional[str] = None
    about_text: Optional[str] = None
    education: Optional[str] = None
    status: Optional[str] = None
    stats_experience: Optional[str] = None
    stats_recovered: Optional[str] = None
    expertise_text: Optional[str] = None


class BackupLead(BaseModel):
    id: uuid.UUID
    name: str
    phone: str
    issue: str
    status: LeadStatus
    source: LeadSource
    created_at: datetime


class BackupArticle(BaseModel):
    id: uuid.UUID
    title: str
    excerpt: str
    content: str
    image: Optional[str] = None
    published_at: datetime


class BackupSnapshot(BaseModel):
    """Export/restore file: leads, site content and articles"""

    version: int = 1
    exported_at: Optional[datetime] = None
    leads: List[BackupLead]
    content: SiteContentSchema
    articles: List[BackupArticle]


class RestoreResponse(BaseModel):
    leads: int
    articles: int
    content_fields: int

"""SQLAlchemy ORM models for back-office records"""

import uuid
from sqlalchemy import Column, DateTime, Text, Uuid
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

from exitum_gateway.domain.models import LeadStatus

Base = declarative_base()


class Lead(Base):
    """Prospective client captured by the contact form or the chat"""

    __tablename__ = "lead"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False, index=True)
    issue = Column(Text, nullable=False, default="")
    status = Column(Text, nullable=False, default=LeadStatus.NEW.value)
    source = Column(Text, nullable=False)  # form | chat
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class Article(Base):
    """Blog article shown in the publications section"""

    __tablename__ = "article"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(Text, nullable=False)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)  # Markdown
    image = Column(Text, nullable=True)  # URL or data URL
    published_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)


class SiteContentEntry(Base):
    """One edited site text; missing keys fall back to defaults"""

    __tablename__ = "site_content"

    key = Column(Text, primary_key=True)
    value = Column(Text, nullable=False)

"""Data access layer for back-office entities"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from exitum_gateway.infrastructure.database.models import Article, Lead, SiteContentEntry
from exitum_gateway.domain.models import LeadSource, LeadStatus
from exitum_gateway.domain.exceptions import ArticleNotFoundError, LeadNotFoundError
from exitum_gateway.domain.site_content import DEFAULT_SITE_CONTENT, SITE_CONTENT_FIELDS, default_excerpt


class LeadRepository:
    """Repository for leads"""

    def __init__(self, db: Session):
        self.db = db

    def create_lead(self, name: str, phone: str, issue: str, source: LeadSource) -> Lead:
        """Persist a new lead in status NEW"""
        db_lead = Lead(
            name=name,
            phone=phone,
            issue=issue,
            status=LeadStatus.NEW.value,
            source=source.value,
        )
        self.db.add(db_lead)
        self.db.flush()  # Get ID without committing
        return db_lead

    def list_leads(self, limit: int = 100) -> List[Lead]:
        """Fetch most recent leads first"""
        return (
            self.db.query(Lead)
            .order_by(Lead.created_at.desc())
            .limit(limit)
            .all()
        )

    def get_lead(self, lead_id: uuid.UUID) -> Optional[Lead]:
        return self.db.query(Lead).filter(Lead.id == lead_id).first()

    def update_status(self, lead_id: uuid.UUID, status: LeadStatus) -> Lead:
        """Move lead along the pipeline"""
        db_lead = self.get_lead(lead_id)
        if db_lead is None:
            raise LeadNotFoundError(f"Lead {lead_id} not found")
        db_lead.status = status.value
        self.db.flush()
        return db_lead

    def delete_lead(self, lead_id: uuid.UUID) -> None:
        db_lead = self.get_lead(lead_id)
        if db_lead is None:
            raise LeadNotFoundError(f"Lead {lead_id} not found")
        self.db.delete(db_lead)
        self.db.flush()


class ArticleRepository:
    """Repository for blog articles"""

    def __init__(self, db: Session):
        self.db = db

    def create_article(
        self,
        title: str,
        content: str,
        excerpt: Optional[str] = None,
        image: Optional[str] = None,
        published_at: Optional[datetime] = None,
    ) -> Article:
        """Persist a new article; blank excerpt is derived from the content"""
        db_article = Article(
            title=title,
            content=content,
            excerpt=excerpt or default_excerpt(content),
            image=image or None,
        )
        if published_at is not None:
            db_article.published_at = published_at  # Otherwise server time
        self.db.add(db_article)
        self.db.flush()
        return db_article

    def list_articles(self, limit: int = 100) -> List[Article]:
        """Newest publications first"""
        return (
            self.db.query(Article)
            .order_by(Article.published_at.desc())
            .limit(limit)
            .all()
        )

    def get_article(self, article_id: uuid.UUID) -> Article:
        db_article = self.db.query(Article).filter(Article.id == article_id).first()
        if db_article is None:
            raise ArticleNotFoundError(f"Article {article_id} not found")
        return db_article

    def update_article(
        self,
        article_id: uuid.UUID,
        title: str,
        content: str,
        excerpt: Optional[str] = None,
        image: Optional[str] = None,
    ) -> Article:
        """Replace article text; publication date is kept"""
        db_article = self.get_article(article_id)
        db_article.title = title
        db_article.content = content
        db_article.excerpt = excerpt or default_excerpt(content)
        db_article.image = image or None
        self.db.flush()
        return db_article

    def delete_article(self, article_id: uuid.UUID) -> None:
        self.db.delete(self.get_article(article_id))
        self.db.flush()


class SiteContentRepository:
    """Repository for editable site texts"""

    def __init__(self, db: Session):
        self.db = db

    def get_content(self) -> Dict[str, str]:
        """Defaults overlaid with edited values"""
        content = dict(DEFAULT_SITE_CONTENT)
        for entry in self.db.query(SiteContentEntry).all():
            if entry.key in content:
                content[entry.key] = entry.value
        return content

    def update_content(self, changes: Dict[str, str]) -> Dict[str, str]:
        """Upsert the given fields, leaving the rest untouched"""
        for key, value in changes.items():
            if key not in SITE_CONTENT_FIELDS:
                raise KeyError(f"Unknown site content field: {key}")
            entry = self.db.get(SiteContentEntry, key)
            if entry is None:
                self.db.add(SiteContentEntry(key=key, value=value))
            else:
                entry.value = value
        self.db.flush()
        return self.get_content()


class BackupRepository:
    """Full export and overwrite-restore of leads, site content and articles"""

    def __init__(self, db: Session):
        self.db = db

    def export_snapshot(self) -> Dict[str, Any]:
        leads = self.db.query(Lead).order_by(Lead.created_at).all()
        articles = self.db.query(Article).order_by(Article.published_at).all()
        return {
            "leads": [
                {
                    "id": lead.id,
                    "name": lead.name,
                    "phone": lead.phone,
                    "issue": lead.issue,
                    "status": lead.status,
                    "source": lead.source,
                    "created_at": lead.created_at,
                }
                for lead in leads
            ],
            "content": SiteContentRepository(self.db).get_content(),
            "articles": [
                {
                    "id": article.id,
                    "title": article.title,
                    "excerpt": article.excerpt,
                    "content": article.content,
                    "image": article.image,
                    "published_at": article.published_at,
                }
                for article in articles
            ],
        }

    def restore_snapshot(
        self,
        leads: List[Dict[str, Any]],
        content: Dict[str, str],
        articles: List[Dict[str, Any]],
    ) -> None:
        """Replace all current data with the snapshot"""
        self.db.query(Lead).delete()
        self.db.query(Article).delete()
        self.db.query(SiteContentEntry).delete()
        self.db.expunge_all()  # Snapshot rows may reuse the IDs just deleted

        for lead in leads:
            self.db.add(
                Lead(
                    id=lead["id"],
                    name=lead["name"],
                    phone=lead["phone"],
                    issue=lead["issue"],
                    status=LeadStatus(lead["status"]).value,
                    source=LeadSource(lead["source"]).value,
                    created_at=lead["created_at"],
                )
            )
        for article in articles:
            self.db.add(Article(**article))

        SiteContentRepository(self.db).update_content(content)

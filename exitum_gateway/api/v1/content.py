"""/v1/content - editable site texts"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from exitum_gateway.api.v1.schemas import SiteContentSchema, SiteContentUpdate
from exitum_gateway.infrastructure.database.session import get_db
from exitum_gateway.infrastructure.database.repositories import SiteContentRepository

router = APIRouter()


@router.get("/content", response_model=SiteContentSchema)
def get_content(db: Session = Depends(get_db)):
    """Current site texts, defaults where never edited"""
    return SiteContentSchema(**SiteContentRepository(db).get_content())


@router.patch("/content", response_model=SiteContentSchema)
def update_content(request_body: SiteContentUpdate, db: Session = Depends(get_db)):
    content = SiteContentRepository(db).update_content(request_body.model_dump(exclude_unset=True, exclude_none=True))
    db.commit()
    return SiteContentSchema(**content)

"""/v1/leads - contact form submissions and back-office lead tracking"""

import logging
import uuid
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from exitum_gateway.api.v1.schemas import LeadCreateRequest, LeadListResponse, LeadSchema, LeadStatusUpdate
from exitum_gateway.api.dependencies import get_request_id
from exitum_gateway.config import settings
from exitum_gateway.domain.models import LeadSource
from exitum_gateway.domain.exceptions import LeadNotFoundError
from exitum_gateway.infrastructure.database.models import Lead
from exitum_gateway.infrastructure.database.session import get_db
from exitum_gateway.infrastructure.database.repositories import LeadRepository
from exitum_gateway.infrastructure.observability.metrics import lead_counter

router = APIRouter()


def _parse_lead_id(lead_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(lead_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid lead ID format")


def _to_schema(lead: Lead) -> LeadSchema:
    return LeadSchema(
        lead_id=str(lead.id),
        name=lead.name,
        phone=lead.phone,
        issue=lead.issue,
        status=lead.status,
        source=lead.source,
        created_at=lead.created_at.isoformat(),
    )


@router.post("/leads", response_model=LeadSchema, status_code=201)
def create_lead(request_body: LeadCreateRequest, request: Request, db: Session = Depends(get_db)):
    """Contact form submission"""
    request_id = get_request_id(request)

    lead_repo = LeadRepository(db)
    db_lead = lead_repo.create_lead(
        name=request_body.name,
        phone=request_body.phone,
        issue=request_body.issue,
        source=LeadSource.FORM,
    )
    db.commit()
    db.refresh(db_lead)

    lead_counter.labels(source=LeadSource.FORM.value).inc()
    logging.info("Lead captured", extra={"request_id": request_id, "lead_id": str(db_lead.id), "source": "form"})

    return _to_schema(db_lead)


@router.get("/leads", response_model=LeadListResponse)
def list_leads(
    limit: int = Query(settings.lead_list_limit, ge=1, le=1000, description="Maximum leads to return"),
    db: Session = Depends(get_db),
):
    """Newest leads first"""
    leads = LeadRepository(db).list_leads(limit=limit)
    return LeadListResponse(leads=[_to_schema(lead) for lead in leads])


@router.patch("/leads/{lead_id}", response_model=LeadSchema)
def update_lead_status(lead_id: str, request_body: LeadStatusUpdate, db: Session = Depends(get_db)):
    """Move a lead to analysis, in progress or archive"""
    lead_uuid = _parse_lead_id(lead_id)

    try:
        db_lead = LeadRepository(db).update_status(lead_uuid, request_body.status)
    except LeadNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))

    db.commit()
    db.refresh(db_lead)
    return _to_schema(db_lead)


@router.delete("/leads/{lead_id}", status_code=204)
def delete_lead(lead_id: str, db: Session = Depends(get_db)):
    lead_uuid = _parse_lead_id(lead_id)

    try:
        LeadRepository(db).delete_lead(lead_uuid)
    except LeadNotFoundError as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))

    db.commit()
    return Response(status_code=204)

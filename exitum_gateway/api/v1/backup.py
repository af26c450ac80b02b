"""/v1/backup - export and overwrite-restore of back-office data"""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session

from exitum_gateway.api.v1.schemas import BackupSnapshot, RestoreResponse
from exitum_gateway.api.dependencies import get_request_id
from exitum_gateway.infrastructure.database.session import get_db
from exitum_gateway.infrastructure.database.repositories import BackupRepository
from exitum_gateway.infrastructure.observability.metrics import backup_counter

router = APIRouter()


@router.get("/backup", response_model=BackupSnapshot)
def export_backup(request: Request, db: Session = Depends(get_db)):
    """Leads, site content and articles as one JSON document"""
    snapshot = BackupSnapshot(
        exported_at=datetime.now(timezone.utc),
        **BackupRepository(db).export_snapshot(),
    )

    backup_counter.labels(operation="export").inc()
    logging.info(
        "Backup exported",
        extra={
            "request_id": get_request_id(request),
            "leads": len(snapshot.leads),
            "articles": len(snapshot.articles),
        },
    )
    return snapshot


@router.post("/backup", response_model=RestoreResponse)
def restore_backup(snapshot: BackupSnapshot, request: Request, db: Session = Depends(get_db)):
    """
    Replace all leads, site content and articles with the snapshot.

    Runs in one transaction: a snapshot that fails to load leaves current
    data untouched.
    """
    request_id = get_request_id(request)
    content = snapshot.content.model_dump()

    try:
        BackupRepository(db).restore_snapshot(
            leads=[lead.model_dump() for lead in snapshot.leads],
            content=content,
            articles=[article.model_dump() for article in snapshot.articles],
        )
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Backup restore failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail="Invalid backup file")

    backup_counter.labels(operation="restore").inc()
    logging.info(
        "Backup restored",
        extra={"request_id": request_id, "leads": len(snapshot.leads), "articles": len(snapshot.articles)},
    )
    return RestoreResponse(
        leads=len(snapshot.leads),
        articles=len(snapshot.articles),
        content_fields=len(content),
    )

import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from alumni_api.models.alumni import Alumni, PendingAlumni
from alumni_api.schemas.alumni import DraftProfile, DRAFT_FIELDS
from alumni_api.services.alumni_service import commit_or_rollback
from alumni_api.services.validation import validate_draft

logger = logging.getLogger(__name__)


def create_pending(db: Session, record: dict) -> PendingAlumni:
    pending = PendingAlumni(**record, is_confirmed=False)
    db.add(pending)
    commit_or_rollback(db, "Submitting profile")
    db.refresh(pending)
    logger.info(f"Pending submission stored: id={pending.id}")
    return pending


def list_pending(db: Session) -> List[PendingAlumni]:
    return db.query(PendingAlumni).order_by(PendingAlumni.created_at.asc()).all()


def count_pending(db: Session) -> int:
    return db.query(PendingAlumni).filter(PendingAlumni.is_confirmed.is_(False)).count()


def get_pending_or_404(db: Session, pending_id: str) -> PendingAlumni:
    pending = db.query(PendingAlumni).filter(PendingAlumni.id == pending_id).first()
    if not pending:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pending submission not found.")
    return pending


def approve_pending(db: Session, pending_id: str, approved_by: str) -> Alumni:
    """
    대기 중인 제출을 확정 동문 레코드로 옮긴다.
    저장된 뒤 규칙이 바뀌었을 수 있으므로 한 번 더 검증한다.
    """
    pending = get_pending_or_404(db, pending_id)

    result = validate_draft(DraftProfile.from_record(pending))
    if not result.valid:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Pending submission is no longer valid.", "errors": result.errors}
        )

    alumni = Alumni(
        **{field: result.record[field] for field in DRAFT_FIELDS},
        image=pending.image or None,
        created_by=approved_by
    )
    pending.is_confirmed = True
    db.add(alumni)
    db.delete(pending)
    commit_or_rollback(db, "Approving submission")
    db.refresh(alumni)
    logger.info(f"Pending submission approved: pending_id={pending_id} alumni_id={alumni.id}")
    return alumni


def reject_pending(db: Session, pending_id: str) -> None:
    pending = get_pending_or_404(db, pending_id)
    db.delete(pending)
    commit_or_rollback(db, "Rejecting submission")
    logger.info(f"Pending submission rejected: id={pending_id}")

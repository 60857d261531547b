import logging
from typing import List, Optional

from fastapi import HTTPException, UploadFile, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from alumni_api.core.config import settings
from alumni_api.models.alumni import Alumni
from alumni_api.schemas.alumni import AttachedImage, DraftProfile
from alumni_api.services import storage_service
from alumni_api.services.validation import validate_draft

logger = logging.getLogger(__name__)

ORDERABLE_COLUMNS = ("name", "session", "faculty", "profession", "upazilla", "created_at")


def commit_or_rollback(db: Session, action: str) -> None:
    """ 커밋 실패 시 롤백하고 500 으로 알린다 (부분 반영 없음) """
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{action} failed: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"{action} failed.")


def attach_image(draft: DraftProfile, file: Optional[UploadFile], max_bytes: Optional[int] = None) -> Optional[bytes]:
    """
    업로드 파일을 draft 에 첨부 정보로 기록 (실제 업로드는 검증 후).
    한도보다 1 바이트만 더 읽어서, 큰 파일도 메모리에 다 올리지 않고 크기 초과를 알 수 있다.
    """
    if file is None or not file.filename:
        draft.attachment = None
        return None
    if max_bytes is None:
        max_bytes = settings.MAX_IMAGE_BYTES
    data = file.file.read(max_bytes + 1)
    draft.attachment = AttachedImage(
        filename=file.filename,
        content_type=file.content_type,
        size=max(file.size or 0, len(data))
    )
    return data


def prepare_submission(draft: DraftProfile, image_data: Optional[bytes], bucket: str) -> dict:
    """
    검증 → (이미지가 있으면) 업로드 순서로 진행하고 저장할 값을 돌려준다.
    검증 실패 시 아무것도 업로드하지 않고 422 를 던진다.
    """
    result = validate_draft(draft)
    if not result.valid:
        logger.info(f"Profile validation failed: {sorted(result.errors)}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": "Validation failed.", "errors": result.errors}
        )

    record = result.record
    record["image"] = draft.image or None
    if image_data is not None and draft.attachment is not None:
        record["image"] = storage_service.upload_image(
            bucket, draft.attachment.filename, image_data, draft.attachment.content_type
        )
    return record


def discard_uploaded_image(draft: DraftProfile, record: dict, bucket: str) -> None:
    """ 저장이 실패했을 때 이번 요청에서 올린 사진만 지운다 (기존 사진은 유지) """
    uploaded = record.get("image")
    if uploaded and uploaded != (draft.image or None):
        storage_service.delete_image(bucket, uploaded)


def list_alumni(db: Session, order_by: str = "name", ascending: bool = True) -> List[Alumni]:
    if order_by not in ORDERABLE_COLUMNS:
        order_by = "name"
    column = getattr(Alumni, order_by)
    return db.query(Alumni).order_by(column.asc() if ascending else column.desc()).all()


def get_alumni_or_404(db: Session, alumni_id: str) -> Alumni:
    alumni = db.query(Alumni).filter(Alumni.id == alumni_id).first()
    if not alumni:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Alumni record not found.")
    return alumni


def create_alumni(db: Session, record: dict, created_by: Optional[str]) -> Alumni:
    alumni = Alumni(**record, created_by=created_by)
    db.add(alumni)
    commit_or_rollback(db, "Creating alumni record")
    db.refresh(alumni)
    logger.info(f"Alumni record created: id={alumni.id} by={created_by}")
    return alumni


def update_alumni(db: Session, alumni: Alumni, record: dict) -> Alumni:
    for field, value in record.items():
        setattr(alumni, field, value)
    commit_or_rollback(db, "Updating alumni record")
    db.refresh(alumni)
    logger.info(f"Alumni record updated: id={alumni.id}")
    return alumni


def delete_alumni(db: Session, alumni_id: str) -> None:
    alumni = get_alumni_or_404(db, alumni_id)
    db.delete(alumni)
    commit_or_rollback(db, "Deleting alumni record")
    logger.info(f"Alumni record deleted: id={alumni_id}")

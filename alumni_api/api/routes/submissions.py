from typing import Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from alumni_api.core.config import settings
from alumni_api.dependencies.db import get_db
from alumni_api.schemas.alumni import DraftProfile, SubmissionResponse
from alumni_api.services.alumni_service import attach_image, prepare_submission, discard_uploaded_image
from alumni_api.services.pending_service import create_pending

router = APIRouter()


@router.post("", response_model=SubmissionResponse, status_code=201, summary="동문 정보 제출 (승인 대기)")
def submit_profile(
    draft: DraftProfile = Depends(DraftProfile.as_form),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """
    누구나 자신의 정보를 제출할 수 있고, 관리자가 승인하기 전까지는 공개 목록에 나오지 않습니다.
    - 검증 실패 시 422 와 필드별 오류
    - 사진은 1MB 이하 이미지만
    """
    image_data = attach_image(draft, image)
    record = prepare_submission(draft, image_data, settings.PENDING_PHOTO_BUCKET)
    try:
        pending = create_pending(db, record)
    except HTTPException:
        discard_uploaded_image(draft, record, settings.PENDING_PHOTO_BUCKET)
        raise
    return SubmissionResponse(
        id=pending.id,
        message="Thank you! Your data has been submitted and will be reviewed soon."
    )

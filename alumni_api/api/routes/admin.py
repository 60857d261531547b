from typing import Optional

from fastapi import APIRouter, Depends, Body, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from alumni_api.core.config import settings
from alumni_api.dependencies.db import get_db
from alumni_api.dependencies.admin_auth import get_current_admin
from alumni_api.dependencies.directory import get_directory_query
from alumni_api.models.admin import Admin
from alumni_api.schemas.alumni import (
    AlumniRecord, AlumniListResponse, AlumniUpdate, DraftProfile,
    PendingAlumniRecord, PendingListResponse, MessageResponse
)
from alumni_api.schemas.notice import NoticeCreate, NoticeResponse
from alumni_api.schemas.stats import DashboardResponse
from alumni_api.services.aggregation import dashboard_summary
from alumni_api.services.alumni_service import (
    attach_image, prepare_submission, discard_uploaded_image, list_alumni, get_alumni_or_404,
    create_alumni, update_alumni, delete_alumni
)
from alumni_api.services.directory import DirectoryQuery, filter_sort
from alumni_api.services.notice_service import create_notice
from alumni_api.services.pending_service import list_pending, count_pending, approve_pending, reject_pending

router = APIRouter(
    dependencies=[Depends(get_current_admin)]
)


# =========================
# 동문 레코드 관리
# =========================

@router.get("/alumni", response_model=AlumniListResponse, summary="동문 목록 (관리자)")
def get_all_alumni(
    query: DirectoryQuery = Depends(get_directory_query),
    db: Session = Depends(get_db)
):
    alumni = filter_sort(list_alumni(db, order_by="name"), query)
    return AlumniListResponse(
        total=len(alumni),
        alumni=[AlumniRecord.model_validate(a) for a in alumni]
    )


@router.get("/alumni/{alumni_id}", response_model=AlumniRecord, summary="동문 레코드 조회 (관리자)")
def get_alumni(alumni_id: str, db: Session = Depends(get_db)):
    return AlumniRecord.model_validate(get_alumni_or_404(db, alumni_id))


@router.post("/alumni", response_model=AlumniRecord, status_code=201, summary="동문 레코드 추가 (관리자)")
def add_alumni(
    draft: DraftProfile = Depends(DraftProfile.as_form),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    image_data = attach_image(draft, image)
    record = prepare_submission(draft, image_data, settings.ADMIN_PHOTO_BUCKET)
    try:
        alumni = create_alumni(db, record, created_by=str(admin.id))
    except HTTPException:
        discard_uploaded_image(draft, record, settings.ADMIN_PHOTO_BUCKET)
        raise
    return AlumniRecord.model_validate(alumni)


@router.patch("/alumni/{alumni_id}", response_model=AlumniRecord, summary="동문 레코드 수정 (관리자)")
def edit_alumni(
    alumni_id: str,
    changes: AlumniUpdate = Depends(AlumniUpdate.as_form),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """
    기존 레코드로 폼을 채운 뒤 보낸 필드만 덮어씁니다.
    직업을 비고용 직업으로 바꾸면 job_rank / company 는 비워집니다.
    새 사진을 보내지 않으면 기존 사진을 유지합니다.
    """
    alumni = get_alumni_or_404(db, alumni_id)
    draft = DraftProfile.from_record(alumni)
    draft.apply(changes.model_dump(exclude_none=True))
    image_data = attach_image(draft, image)
    record = prepare_submission(draft, image_data, settings.ADMIN_PHOTO_BUCKET)
    try:
        alumni = update_alumni(db, alumni, record)
    except HTTPException:
        discard_uploaded_image(draft, record, settings.ADMIN_PHOTO_BUCKET)
        raise
    return AlumniRecord.model_validate(alumni)


@router.delete("/alumni/{alumni_id}", response_model=MessageResponse, summary="동문 레코드 삭제 (관리자)")
def remove_alumni(alumni_id: str, db: Session = Depends(get_db)):
    delete_alumni(db, alumni_id)
    return MessageResponse(message="Alumni record deleted.")


# =========================
# 제출 승인
# =========================

@router.get("/pending", response_model=PendingListResponse, summary="승인 대기 목록")
def get_pending_submissions(db: Session = Depends(get_db)):
    pending = list_pending(db)
    return PendingListResponse(
        total=len(pending),
        pending=[PendingAlumniRecord.model_validate(p) for p in pending]
    )


@router.post("/pending/{pending_id}/approve", response_model=AlumniRecord, summary="제출 승인")
def approve_submission(
    pending_id: str,
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    return AlumniRecord.model_validate(approve_pending(db, pending_id, approved_by=str(admin.id)))


@router.delete("/pending/{pending_id}", response_model=MessageResponse, summary="제출 거절")
def reject_submission(pending_id: str, db: Session = Depends(get_db)):
    reject_pending(db, pending_id)
    return MessageResponse(message="Submission rejected.")


# =========================
# 공지 / 통계
# =========================

@router.post("/notices", response_model=NoticeResponse, status_code=201, summary="공지 등록")
def post_notice(
    notice_in: NoticeCreate = Body(...),
    db: Session = Depends(get_db),
    admin: Admin = Depends(get_current_admin)
):
    return NoticeResponse.model_validate(create_notice(db, notice_in, created_by=str(admin.id)))


@router.get("/stats", response_model=DashboardResponse, summary="대시보드 통계 (승인 대기 수 포함)")
def get_dashboard(db: Session = Depends(get_db)):
    summary = dashboard_summary(list_alumni(db), pending_count=count_pending(db))
    return DashboardResponse.from_summary(summary)

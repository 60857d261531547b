from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from alumni_api.dependencies.db import get_db
from alumni_api.schemas.notice import NoticeListResponse, NoticeResponse
from alumni_api.services.notice_service import list_notices

router = APIRouter()


@router.get("", response_model=NoticeListResponse, summary="공지 목록 (최신순)")
def get_notices(db: Session = Depends(get_db)):
    return NoticeListResponse(notices=[NoticeResponse.model_validate(n) for n in list_notices(db)])

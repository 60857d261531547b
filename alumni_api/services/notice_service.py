import logging
from typing import List

from sqlalchemy.orm import Session

from alumni_api.models.notice import Notice
from alumni_api.schemas.notice import NoticeCreate
from alumni_api.services.alumni_service import commit_or_rollback

logger = logging.getLogger(__name__)


def list_notices(db: Session) -> List[Notice]:
    return db.query(Notice).order_by(Notice.created_at.desc(), Notice.id.desc()).all()


def create_notice(db: Session, notice_in: NoticeCreate, created_by: str) -> Notice:
    notice = Notice(title=notice_in.title, content=notice_in.content, created_by=created_by)
    db.add(notice)
    commit_or_rollback(db, "Posting notice")
    db.refresh(notice)
    logger.info(f"Notice posted: id={notice.id} by={created_by}")
    return notice

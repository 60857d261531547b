from uuid import uuid4

from sqlalchemy import Column, String, Boolean, TIMESTAMP, func
from alumni_api.db.base import Base


def _new_id() -> str:
    return str(uuid4())


class AlumniColumnsMixin:
    id = Column(String(36), primary_key=True, default=_new_id, index=True)
    name = Column(String(255), nullable=False)
    session = Column(String(7), nullable=False, index=True, comment="학년도 코드, 예: 2019-20")
    faculty = Column(String(255), nullable=False, index=True)
    profession = Column(String(100), nullable=False, index=True)
    upazilla = Column(String(100), nullable=False, index=True)
    email = Column(String(255), nullable=True)
    whatsapp = Column(String(50), nullable=True)
    facebook_link = Column(String(512), nullable=True)
    village = Column(String(255), nullable=True)
    job_rank = Column(String(255), nullable=True, comment="교사인 경우 직위")
    company = Column(String(255), nullable=True, comment="교사인 경우 학과")
    image = Column(String(1023), nullable=True, comment="S3 에 저장된 사진 URL")
    created_by = Column(String(128), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now())


class Alumni(AlumniColumnsMixin, Base):
    __tablename__ = "alumni"


class PendingAlumni(AlumniColumnsMixin, Base):
    __tablename__ = "pending_alumni"

    is_confirmed = Column(Boolean, nullable=False, default=False)

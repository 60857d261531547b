from datetime import datetime
from typing import Optional, List, Any

from fastapi import Form
from pydantic import BaseModel, Field

from alumni_api.core.fields import requires_employment


DRAFT_FIELDS = (
    "name",
    "session",
    "faculty",
    "email",
    "profession",
    "upazilla",
    "village",
    "job_rank",
    "company",
    "whatsapp",
    "facebook_link",
)

EMPLOYMENT_FIELDS = ("job_rank", "company")


class AlumniRecord(BaseModel):
    id: str
    name: str
    session: str
    faculty: str
    profession: str
    upazilla: str
    email: Optional[str] = None
    whatsapp: Optional[str] = None
    facebook_link: Optional[str] = None
    village: Optional[str] = None
    job_rank: Optional[str] = None
    company: Optional[str] = None
    image: Optional[str] = None
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PendingAlumniRecord(AlumniRecord):
    is_confirmed: bool = False


class AttachedImage(BaseModel):
    """ 아직 업로드되지 않은 첨부 이미지 정보 """
    filename: str
    content_type: Optional[str] = None
    size: int


class DraftProfile(BaseModel):
    """
    입력 중인 동문 프로필 폼.
    새 제출은 빈 상태로, 수정은 기존 레코드에서 채워서 시작한다.
    """
    id: Optional[str] = None
    name: str = ""
    session: str = ""
    faculty: str = ""
    email: str = ""
    profession: str = ""
    upazilla: str = ""
    village: str = ""
    job_rank: str = ""
    company: str = ""
    whatsapp: str = ""
    facebook_link: str = ""
    image: Optional[str] = None
    attachment: Optional[AttachedImage] = None
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Any) -> "DraftProfile":
        values = {}
        for field in DRAFT_FIELDS:
            value = getattr(record, field, None)
            values[field] = value if value is not None else ""
        return cls(
            id=str(record.id) if getattr(record, "id", None) is not None else None,
            image=getattr(record, "image", None),
            **values,
        )

    @classmethod
    def as_form(
        cls,
        name: str = Form(""),
        session: str = Form(""),
        faculty: str = Form(""),
        email: str = Form(""),
        profession: str = Form(""),
        upazilla: str = Form(""),
        village: str = Form(""),
        job_rank: str = Form(""),
        company: str = Form(""),
        whatsapp: str = Form(""),
        facebook_link: str = Form(""),
    ):
        draft = cls()
        draft.apply({
            "name": name, "session": session, "faculty": faculty,
            "email": email, "profession": profession, "upazilla": upazilla,
            "village": village, "job_rank": job_rank, "company": company,
            "whatsapp": whatsapp, "facebook_link": facebook_link,
        })
        return draft

    def set_field(self, field: str, value: Optional[str]) -> None:
        if field not in DRAFT_FIELDS:
            raise KeyError(field)
        value = value or ""
        setattr(self, field, value)
        self.errors.pop(field, None)
        if field == "profession" and not requires_employment(value):
            for employment_field in EMPLOYMENT_FIELDS:
                setattr(self, employment_field, "")

    def apply(self, changes: dict) -> None:
        """
        여러 필드를 한 번에 반영.
        profession 은 마지막에 넣어서 비고용 직업이면 함께 들어온 job_rank / company 도 지운다
        """
        for field, value in changes.items():
            if field != "profession":
                self.set_field(field, value)
        if "profession" in changes:
            self.set_field("profession", changes["profession"])


class AlumniUpdate(BaseModel):
    name: Optional[str] = None
    session: Optional[str] = None
    faculty: Optional[str] = None
    email: Optional[str] = None
    profession: Optional[str] = None
    upazilla: Optional[str] = None
    village: Optional[str] = None
    job_rank: Optional[str] = None
    company: Optional[str] = None
    whatsapp: Optional[str] = None
    facebook_link: Optional[str] = None

    @classmethod
    def as_form(
        cls,
        name: Optional[str] = Form(None),
        session: Optional[str] = Form(None),
        faculty: Optional[str] = Form(None),
        email: Optional[str] = Form(None),
        profession: Optional[str] = Form(None),
        upazilla: Optional[str] = Form(None),
        village: Optional[str] = Form(None),
        job_rank: Optional[str] = Form(None),
        company: Optional[str] = Form(None),
        whatsapp: Optional[str] = Form(None),
        facebook_link: Optional[str] = Form(None),
    ):
        return cls(
            name=name, session=session, faculty=faculty, email=email,
            profession=profession, upazilla=upazilla, village=village,
            job_rank=job_rank, company=company, whatsapp=whatsapp,
            facebook_link=facebook_link,
        )


class AlumniListResponse(BaseModel):
    total: int
    alumni: List[AlumniRecord]


class PendingListResponse(BaseModel):
    total: int
    pending: List[PendingAlumniRecord]


class FilterOptionsResponse(BaseModel):
    key: Optional[str]
    options: List[str]


class FormOptionsResponse(BaseModel):
    sessions: List[str]
    faculties: List[str]
    professions: List[str]
    upazillas: List[str]
    employment_professions: List[str]
    employment_labels: dict[str, dict[str, str]]
    sort_keys: List[str]
    filter_keys: List[str]


class SubmissionResponse(BaseModel):
    id: str
    message: str


class MessageResponse(BaseModel):
    message: str

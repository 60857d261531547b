from datetime import datetime
from typing import Optional, List

from pydantic import BaseModel, field_validator


class NoticeCreate(BaseModel):
    title: str
    content: str

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class NoticeResponse(BaseModel):
    id: int
    title: str
    content: str
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NoticeListResponse(BaseModel):
    notices: List[NoticeResponse]

import re
from dataclasses import dataclass, field
from typing import Optional

from alumni_api.core.config import settings
from alumni_api.core.fields import requires_employment, employment_labels
from alumni_api.schemas.alumni import DraftProfile, DRAFT_FIELDS, EMPLOYMENT_FIELDS


SESSION_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")
REQUIRED_FIELDS = {
    "name": "Full Name",
    "faculty": "Faculty/Department",
    "session": "Academic Session",
    "upazilla": "Permanent Upazilla",
    "profession": "Current Profession",
}
OPTIONAL_FIELDS = ("email", "whatsapp", "facebook_link", "village", "job_rank", "company")


@dataclass
class ValidationResult:
    valid: bool
    errors: dict[str, str] = field(default_factory=dict)
    record: Optional[dict] = None


def validate_draft(draft: DraftProfile, max_image_bytes: Optional[int] = None) -> ValidationResult:
    """
    제출 전 폼 검증. 예외를 던지지 않고 위반한 필드를 모두 모아서 돌려준다.
    통과하면 저장에 바로 쓸 수 있게 정리된 dict 를 record 로 담는다.
    """
    if max_image_bytes is None:
        max_image_bytes = settings.MAX_IMAGE_BYTES

    values = {name: (getattr(draft, name) or "").strip() for name in DRAFT_FIELDS}
    errors: dict[str, str] = {}

    for name, label in REQUIRED_FIELDS.items():
        if not values[name]:
            errors[name] = f"{label} is required."

    if values["session"] and not SESSION_PATTERN.fullmatch(values["session"]):
        errors["session"] = "Session must look like 2019-20."

    if requires_employment(values["profession"]):
        labels = employment_labels(values["profession"])
        for name in EMPLOYMENT_FIELDS:
            if not values[name]:
                errors[name] = f"{labels[name]} is required for {values['profession']}."

    attachment = draft.attachment
    if attachment is not None:
        if attachment.size > max_image_bytes:
            errors["image"] = f"Image must not exceed {max_image_bytes // 1024} KB."
        elif attachment.content_type and not attachment.content_type.startswith("image/"):
            errors["image"] = "Only image files can be attached."

    draft.errors = dict(errors)
    if errors:
        return ValidationResult(valid=False, errors=errors)
    return ValidationResult(valid=True, record=normalize_draft(values))


def normalize_draft(values: dict) -> dict:
    record = dict(values)
    if not requires_employment(record["profession"]):
        for name in EMPLOYMENT_FIELDS:
            record[name] = ""
    for name in OPTIONAL_FIELDS:
        if not record[name]:
            record[name] = None
    return record

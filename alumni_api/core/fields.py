from enum import Enum
from collections.abc import Mapping
from typing import Any


SESSION_OPTIONS = [
    "2024-25",
    "2023-24",
    "2022-23",
    "2021-22",
    "2020-21",
    "2019-20",
    "2018-19",
    "2017-18",
    "2016-17",
    "2015-16",
    "2014-15",
    "2013-14",
    "2012-13",
    "2011-12",
    "2010-11",
]

FACULTY_OPTIONS = [
    "Agriculture",
    "Animal Science and Veterinary Medicine",
    "Business Administration",
    "Computer Science and Engineering",
    "Environmental Science and Disaster Management",
    "Fisheries",
    "Law and Land Administration",
    "Nutrition and Food Science",
]

PROFESSION_OPTIONS = ["Student", "Job Holder", "Teacher"]

UPAZILLA_OPTIONS = [
    "Assasuni",
    "Debhata",
    "Kalaroa",
    "Kaliganj",
    "Satkhira Sadar",
    "Shyamnagar",
    "Tala",
]

# job_rank / company 가 필수인 직업
EMPLOYMENT_PROFESSIONS = frozenset({"Job Holder", "Teacher"})
# 교사는 같은 필드를 직위/학과로 표시만 바꿔서 보여준다
TEACHING_PROFESSIONS = frozenset({"Teacher"})


def requires_employment(profession: str | None) -> bool:
    return (profession or "").strip() in EMPLOYMENT_PROFESSIONS


def employment_labels(profession: str | None) -> dict[str, str]:
    """ 직업에 따른 job_rank / company 필드 표시 이름 """
    if (profession or "").strip() in TEACHING_PROFESSIONS:
        return {"job_rank": "Designation", "company": "Department"}
    return {"job_rank": "Job Rank/Title", "company": "Company/Organization Name"}


class AlumniField(str, Enum):
    """
    동문 레코드에서 정렬/필터/집계에 쓰이는 필드.
    레코드는 ORM 객체, pydantic 모델, dict 어느 쪽이든 받을 수 있다.
    """
    NAME = "name"
    SESSION = "session"
    FACULTY = "faculty"
    PROFESSION = "profession"
    UPAZILLA = "upazilla"

    def value_of(self, record: Any) -> Any:
        if isinstance(record, Mapping):
            return record.get(self.value)
        return getattr(record, self.value, None)

    def text_of(self, record: Any) -> str:
        value = self.value_of(record)
        return "" if value is None else str(value)


SORT_KEYS = [
    AlumniField.NAME,
    AlumniField.SESSION,
    AlumniField.PROFESSION,
    AlumniField.UPAZILLA,
    AlumniField.FACULTY,
]

FILTER_KEYS = [
    AlumniField.SESSION,
    AlumniField.PROFESSION,
    AlumniField.UPAZILLA,
    AlumniField.FACULTY,
]

# 1차 정렬 키가 같을 때 순서대로 비교하는 보조 키
DEFAULT_TIE_BREAKERS = (AlumniField.SESSION, AlumniField.PROFESSION)

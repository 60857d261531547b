from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from alumni_api.dependencies.db import get_db
from alumni_api.dependencies.directory import get_directory_query
from alumni_api.core.fields import (
    AlumniField, FILTER_KEYS, SORT_KEYS,
    SESSION_OPTIONS, FACULTY_OPTIONS, PROFESSION_OPTIONS, UPAZILLA_OPTIONS,
    EMPLOYMENT_PROFESSIONS, employment_labels
)
from alumni_api.schemas.alumni import (
    AlumniRecord, AlumniListResponse, FilterOptionsResponse, FormOptionsResponse
)
from alumni_api.schemas.stats import DashboardResponse
from alumni_api.services.alumni_service import list_alumni
from alumni_api.services.aggregation import dashboard_summary
from alumni_api.services.directory import DirectoryQuery, filter_sort, filter_options

router = APIRouter()


@router.get("", response_model=AlumniListResponse, summary="동문 목록 (필터/정렬)")
def get_alumni_directory(
    query: DirectoryQuery = Depends(get_directory_query),
    db: Session = Depends(get_db)
):
    """
    공개 동문 목록.
    - filter_key + filter_value: 해당 필드가 값과 정확히 일치하는 레코드만
    - category: 직업 탭 (값 필터와 AND)
    - sort_by / order: 1차 정렬 키와 방향, 같으면 session → profession 순으로 비교
    """
    alumni = filter_sort(list_alumni(db, order_by="profession"), query)
    return AlumniListResponse(
        total=len(alumni),
        alumni=[AlumniRecord.model_validate(a) for a in alumni]
    )


@router.get("/filter-options", response_model=FilterOptionsResponse, summary="필터 값 선택지")
def get_filter_options(
    key: Optional[AlumniField] = Query(None),
    db: Session = Depends(get_db)
):
    if key is not None and key not in FILTER_KEYS:
        raise HTTPException(status_code=400, detail=f"Cannot filter by '{key.value}'.")
    options = filter_options(list_alumni(db), key)
    return FilterOptionsResponse(key=key.value if key else None, options=options)


@router.get("/options", response_model=FormOptionsResponse, summary="폼 선택지")
def get_form_options():
    return FormOptionsResponse(
        sessions=SESSION_OPTIONS,
        faculties=FACULTY_OPTIONS,
        professions=PROFESSION_OPTIONS,
        upazillas=UPAZILLA_OPTIONS,
        employment_professions=sorted(EMPLOYMENT_PROFESSIONS),
        employment_labels={p: employment_labels(p) for p in sorted(EMPLOYMENT_PROFESSIONS)},
        sort_keys=[k.value for k in SORT_KEYS],
        filter_keys=[k.value for k in FILTER_KEYS],
    )


@router.get("/stats", response_model=DashboardResponse, summary="동문 통계 차트 데이터")
def get_alumni_stats(db: Session = Depends(get_db)):
    return DashboardResponse.from_summary(dashboard_summary(list_alumni(db)))

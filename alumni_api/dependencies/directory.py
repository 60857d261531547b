from typing import Optional

from fastapi import HTTPException, Query, status

from alumni_api.core.fields import AlumniField, FILTER_KEYS, PROFESSION_OPTIONS
from alumni_api.services.directory import DirectoryQuery, SortOrder


def get_directory_query(
    sort_by: AlumniField = Query(AlumniField.PROFESSION),
    order: SortOrder = Query(SortOrder.ASC),
    filter_key: Optional[AlumniField] = Query(None),
    filter_value: str = Query(""),
    category: Optional[str] = Query(None, description="직업 탭 필터"),
) -> DirectoryQuery:
    """ 쿼리 파라미터 → DirectoryQuery 상태 객체 """
    if filter_key is not None and filter_key not in FILTER_KEYS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Cannot filter by '{filter_key.value}'.")
    if category and category not in PROFESSION_OPTIONS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown profession category '{category}'.")
    return DirectoryQuery(
        sort_key=sort_by,
        order=order,
        filter_key=filter_key,
        filter_value=filter_value if filter_key is not None else "",
        category=category or None,
    )

from dataclasses import dataclass, replace
from enum import Enum
from functools import cmp_to_key
from typing import Any, Iterable, List, Optional, Sequence

from alumni_api.core.fields import AlumniField, DEFAULT_TIE_BREAKERS


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortOrder":
        return SortOrder.DESC if self is SortOrder.ASC else SortOrder.ASC


@dataclass(frozen=True)
class DirectoryQuery:
    """
    동문 목록 화면의 정렬/필터 상태.
    filter_key 와 filter_value 가 모두 있을 때만 값 필터를 적용하고,
    category 는 직업 탭 필터로 값 필터와 AND 로 결합된다.
    """
    sort_key: AlumniField = AlumniField.PROFESSION
    order: SortOrder = SortOrder.ASC
    filter_key: Optional[AlumniField] = None
    filter_value: str = ""
    category: Optional[str] = None
    tie_breakers: Sequence[AlumniField] = DEFAULT_TIE_BREAKERS

    def with_filter_key(self, key: Optional[AlumniField]) -> "DirectoryQuery":
        # 필터 키가 바뀌면 이전에 고른 값은 의미가 없으므로 비운다
        return replace(self, filter_key=key, filter_value="")

    def with_order_toggled(self) -> "DirectoryQuery":
        return replace(self, order=self.order.toggled())


def compare_values(a: Any, b: Any, order: SortOrder) -> int:
    left = "" if a is None else str(a).lower()
    right = "" if b is None else str(b).lower()
    if left < right:
        return -1 if order is SortOrder.ASC else 1
    if left > right:
        return 1 if order is SortOrder.ASC else -1
    return 0


def _comparator(query: DirectoryQuery):
    keys = [query.sort_key] + [k for k in query.tie_breakers if k != query.sort_key]

    def compare(a: Any, b: Any) -> int:
        for key in keys:
            result = compare_values(key.value_of(a), key.value_of(b), query.order)
            if result != 0:
                return result
        return 0

    return compare


def _matches(record: Any, query: DirectoryQuery) -> bool:
    if query.filter_key and query.filter_value:
        if query.filter_key.text_of(record) != query.filter_value:
            return False
    if query.category:
        if AlumniField.PROFESSION.text_of(record) != query.category:
            return False
    return True


def filter_sort(records: Iterable[Any], query: DirectoryQuery) -> List[Any]:
    """ 필터를 적용한 뒤 정렬한 새 리스트를 반환 (입력은 변경하지 않음, 안정 정렬) """
    filtered = [r for r in records if _matches(r, query)]
    return sorted(filtered, key=cmp_to_key(_comparator(query)))


def filter_options(records: Iterable[Any], key: Optional[AlumniField]) -> List[str]:
    """ 필터 값 선택지: 전체 목록에서 해당 필드의 비어있지 않은 고유값, 오름차순 """
    if key is None:
        return []
    return sorted({key.text_of(r) for r in records if key.text_of(r)})

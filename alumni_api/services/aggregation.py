from typing import Any, Iterable, List, NamedTuple

from alumni_api.core.fields import AlumniField


UNKNOWN_LABEL = "Unknown"
OTHER_LABEL = "Other"
TOP_PROFESSIONS = 5
TOP_REGIONS = 6


class ChartPoint(NamedTuple):
    label: str
    count: int


def aggregate(records: Iterable[Any], field: AlumniField) -> List[ChartPoint]:
    """
    필드 값별로 레코드 수를 센다.
    - 빈 값은 "Unknown" 으로 묶는다
    - 개수 내림차순, 같은 개수는 처음 등장한 순서 유지
    """
    counts: dict[str, int] = {}
    for record in records:
        label = field.text_of(record).strip() or UNKNOWN_LABEL
        counts[label] = counts.get(label, 0) + 1

    points = [ChartPoint(label, count) for label, count in counts.items()]
    points.sort(key=lambda p: p.count, reverse=True)
    return points


def faculty_distribution(records: Iterable[Any]) -> List[ChartPoint]:
    return aggregate(records, AlumniField.FACULTY)


def session_trend(records: Iterable[Any]) -> List[ChartPoint]:
    # "2019-20" 형식은 문자열 정렬이 곧 연도 순서
    return sorted(aggregate(records, AlumniField.SESSION), key=lambda p: p.label)


def region_distribution(records: Iterable[Any], limit: int = TOP_REGIONS) -> List[ChartPoint]:
    return aggregate(records, AlumniField.UPAZILLA)[:limit]


def profession_distribution(records: Iterable[Any], limit: int = TOP_PROFESSIONS) -> List[ChartPoint]:
    """ 상위 limit 개 직업 + 나머지는 "Other" 하나로 합산 """
    points = aggregate(records, AlumniField.PROFESSION)
    top = points[:limit]
    other = sum(p.count for p in points[limit:])
    if other > 0:
        top.append(ChartPoint(OTHER_LABEL, other))
    return top


def dashboard_summary(records: Iterable[Any], pending_count: int = 0) -> dict:
    records = list(records)
    return {
        "total": len(records),
        "pending": pending_count,
        "faculty": faculty_distribution(records),
        "profession": profession_distribution(records),
        "session": session_trend(records),
        "upazilla": region_distribution(records),
    }

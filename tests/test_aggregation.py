from alumni_api.core.fields import AlumniField
from alumni_api.services.aggregation import (
    ChartPoint, aggregate, faculty_distribution, profession_distribution,
    session_trend, region_distribution, dashboard_summary
)


def rows(field, *values):
    return [{field: v} for v in values]


def test_empty_input_gives_empty_series():
    assert aggregate([], AlumniField.FACULTY) == []
    assert profession_distribution([]) == []
    assert session_trend([]) == []
    assert region_distribution([]) == []


def test_counts_descending_and_sum_to_length():
    data = rows("faculty", "Fisheries", "Agriculture", "Fisheries", "Fisheries", "Agriculture", "Law and Land Administration")
    result = faculty_distribution(data)
    assert result == [
        ChartPoint("Fisheries", 3),
        ChartPoint("Agriculture", 2),
        ChartPoint("Law and Land Administration", 1),
    ]
    assert sum(p.count for p in result) == len(data)


def test_missing_values_grouped_as_unknown():
    data = [{"upazilla": "Tala"}, {"upazilla": ""}, {"upazilla": None}, {}]
    result = aggregate(data, AlumniField.UPAZILLA)
    assert ChartPoint("Unknown", 3) in result
    assert sum(p.count for p in result) == len(data)


def test_equal_counts_keep_first_seen_order():
    data = rows("profession", "Teacher", "Student", "Job Holder")
    assert [p.label for p in aggregate(data, AlumniField.PROFESSION)] == ["Teacher", "Student", "Job Holder"]


def test_session_trend_sorted_by_label():
    data = rows("session", "2021-22", "2019-20", "2021-22", "2010-11")
    assert session_trend(data) == [
        ChartPoint("2010-11", 1),
        ChartPoint("2019-20", 1),
        ChartPoint("2021-22", 2),
    ]


def test_region_distribution_keeps_top_six():
    values = []
    for i, name in enumerate(["A", "B", "C", "D", "E", "F", "G", "H"]):
        values += [name] * (10 - i)
    result = region_distribution(rows("upazilla", *values))
    assert [p.label for p in result] == ["A", "B", "C", "D", "E", "F"]


def test_profession_top_five_with_other():
    values = []
    for i, name in enumerate(["P1", "P2", "P3", "P4", "P5", "P6", "P7"]):
        values += [name] * (10 - i)
    data = rows("profession", *values)
    result = profession_distribution(data)
    assert len(result) == 6
    assert result[-1] == ChartPoint("Other", 5 + 4)
    assert sum(p.count for p in result) == len(data)


def test_profession_without_other_when_five_or_less():
    data = rows("profession", "Student", "Student", "Job Holder", "Teacher")
    result = profession_distribution(data)
    assert "Other" not in [p.label for p in result]
    assert sum(p.count for p in result) == len(data)


def test_thresholds_can_be_overridden():
    data = rows("profession", "Student", "Student", "Job Holder", "Teacher")
    assert profession_distribution(data, limit=1) == [ChartPoint("Student", 2), ChartPoint("Other", 2)]
    assert region_distribution(rows("upazilla", "Tala", "Tala", "Debhata"), limit=1) == [ChartPoint("Tala", 2)]


def test_dashboard_summary():
    data = [
        {"faculty": "Fisheries", "profession": "Student", "session": "2020-21", "upazilla": "Tala"},
        {"faculty": "Fisheries", "profession": "Teacher", "session": "2019-20", "upazilla": "Tala"},
    ]
    summary = dashboard_summary(iter(data), pending_count=3)
    assert summary["total"] == 2
    assert summary["pending"] == 3
    assert summary["faculty"] == [ChartPoint("Fisheries", 2)]
    assert [p.label for p in summary["session"]] == ["2019-20", "2020-21"]

from pydantic import BaseModel
from typing import List

class ChartPointOut(BaseModel):
    label: str
    count: int

class DashboardResponse(BaseModel):
    total: int
    pending: int
    faculty: List[ChartPointOut]
    profession: List[ChartPointOut]
    session: List[ChartPointOut]
    upazilla: List[ChartPointOut]

    @classmethod
    def from_summary(cls, summary: dict) -> "DashboardResponse":
        series = {
            key: [ChartPointOut(label=p.label, count=p.count) for p in summary[key]]
            for key in ("faculty", "profession", "session", "upazilla")
        }
        return cls(total=summary["total"], pending=summary["pending"], **series)

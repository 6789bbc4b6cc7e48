from typing import List

from pydantic import BaseModel


class ConsultantPerformanceItem(BaseModel):
    rank: int
    name: str
    students: int
    accepted: int
    pending: int
    rejected: int
    under_review: int
    waitlisted: int
    success_rate: int

    class Config:
        from_attributes = True


class PerformanceOverviewResponse(BaseModel):
    total_students: int
    total_accepted: int
    total_pending: int
    total_rejected: int
    overall_success_rate: int


class ConsultantPerformanceResponse(BaseModel):
    month: str
    month_label: str
    overview: PerformanceOverviewResponse
    consultants: List[ConsultantPerformanceItem]

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from admission_tracker.core.enums import DEFAULT_ADMISSION_STATUS, DEFAULT_VISA_STATUS, StatusField


# ----- Intake -----

class AdmissionDraft(BaseModel):
    """
    Intake form payload. Text fields default to "" so that missing fields are reported
    by the intake validator (first missing field, in form order) rather than by pydantic.
    """

    student_name: str = Field("", max_length=255)
    program_of_interest: str = Field("", max_length=255)
    email_address: str = Field("", max_length=255)
    home_address: str = Field("", max_length=2000)
    school_name: str = Field("", max_length=255)
    consultant_name: str = Field("", max_length=255)
    admission_status: str = Field(DEFAULT_ADMISSION_STATUS, max_length=50)
    visa_status: str = Field(DEFAULT_VISA_STATUS, max_length=100)


class AdmissionResponse(BaseModel):
    id: UUID
    student_name: str
    program_of_interest: str
    email_address: str
    home_address: str
    school_name: str
    consultant_name: str
    admission_status: Optional[str] = None
    visa_status: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class StatusOptionsResponse(BaseModel):
    admission_statuses: List[str]
    visa_statuses: List[str]


# ----- Status edit -----

class StatusUpdate(BaseModel):
    field: StatusField
    value: str = Field(..., max_length=100)


# ----- Management view -----

class FilterInfo(BaseModel):
    month: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ManagementStats(BaseModel):
    """Counts under the strict policy: unrecognized statuses are "other"."""

    total: int
    accepted: int
    pending: int
    rejected: int
    other: int


class AdmissionListResponse(BaseModel):
    period: str
    filter: FilterInfo
    stats: ManagementStats
    applications: List[AdmissionResponse]


# ----- Reports -----

class ReportEmailRequest(BaseModel):
    recipient: str = Field(..., max_length=255)
    month: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class ReportRowResponse(BaseModel):
    student_name: str
    program: str
    email: str
    address: str
    school: str
    consultant: str
    admission_status: str
    visa_status: str
    date_applied: str

    class Config:
        from_attributes = True


class ReportSummaryResponse(BaseModel):
    total: int
    accepted: int
    pending: int
    rejected: int
    under_review: int
    acceptance_rate: str
    period: str
    generated_at: datetime
    report_id: str
    applications: List[ReportRowResponse] = []

    class Config:
        from_attributes = True


class ReportEmailResponse(BaseModel):
    success: bool
    message: str
    summary: ReportSummaryResponse

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from admission_tracker.core.enums import DEFAULT_ADMISSION_STATUS, DEFAULT_VISA_STATUS


class AdmissionRecord(BaseModel):
    """In-memory copy of one admissions row. The reporting engine works on lists of these."""

    id: UUID
    student_name: str
    program_of_interest: str
    email_address: str
    home_address: str
    school_name: str
    consultant_name: str
    admission_status: Optional[str] = DEFAULT_ADMISSION_STATUS
    visa_status: Optional[str] = DEFAULT_VISA_STATUS
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

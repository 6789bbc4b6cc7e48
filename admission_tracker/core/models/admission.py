"""
Admission application: one student, one consultant, two mutable status fields.
created_at is the only time axis used for filtering and reports.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text, Uuid

from admission_tracker.core.enums import DEFAULT_ADMISSION_STATUS, DEFAULT_VISA_STATUS
from admission_tracker.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Admission(Base):
    __tablename__ = "admissions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    student_name = Column(String(255), nullable=False)
    program_of_interest = Column(String(255), nullable=False)
    email_address = Column(String(255), nullable=False, unique=True)
    home_address = Column(Text, nullable=False)
    school_name = Column(String(255), nullable=False)
    consultant_name = Column(String(255), nullable=False, index=True)
    admission_status = Column(String(50), nullable=False, default=DEFAULT_ADMISSION_STATUS)
    visa_status = Column(String(100), nullable=False, default=DEFAULT_VISA_STATUS)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)

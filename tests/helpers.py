import uuid
from datetime import datetime, timezone

from admission_tracker.core.schemas import AdmissionRecord

OPERATOR_PASSWORD = "Correct-Horse-42"


def utc(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)


def make_record(
    created_at: datetime = None,
    consultant_name: str = "Alice Mensah",
    admission_status: str = "Pending",
    visa_status: str = "Documentation in progress",
    student_name: str = "Student",
) -> AdmissionRecord:
    created_at = created_at or utc(2026, 10, 1)
    return AdmissionRecord(
        id=uuid.uuid4(),
        student_name=student_name,
        program_of_interest="Computer Science",
        email_address=f"{uuid.uuid4().hex[:8]}@example.com",
        home_address="1 Main Street",
        school_name="Central High",
        consultant_name=consultant_name,
        admission_status=admission_status,
        visa_status=visa_status,
        created_at=created_at,
        updated_at=created_at,
    )


def valid_draft(**overrides) -> dict:
    draft = {
        "student_name": "  Ama Owusu ",
        "program_of_interest": "Business Administration",
        "email_address": " Ama.Owusu@Example.COM ",
        "home_address": "12 Ring Road, Accra",
        "school_name": "Achimota School",
        "consultant_name": " Kofi Boateng ",
    }
    draft.update(overrides)
    return draft

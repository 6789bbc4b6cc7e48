"""
Intake validation for new admission applications. Pure: never touches the record store.
"""

import re

from admission_tracker.core.enums import DEFAULT_ADMISSION_STATUS, DEFAULT_VISA_STATUS
from admission_tracker.core.exceptions import ValidationError

from .schemas import AdmissionDraft

# Checked in this order; the first empty one is reported.
REQUIRED_FIELDS = (
    ("student_name", "Student Name"),
    ("program_of_interest", "Program of Interest"),
    ("email_address", "Email Address"),
    ("home_address", "Home Address"),
    ("school_name", "School Name"),
    ("consultant_name", "Consultant Name"),
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
INVALID_EMAIL = "invalid email"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match((value or "").strip()))


def validate_admission_draft(draft: AdmissionDraft) -> AdmissionDraft:
    """Return a normalized copy of draft or raise ValidationError."""
    for field, label in REQUIRED_FIELDS:
        if not (getattr(draft, field) or "").strip():
            raise ValidationError(f"{label} is required", field=label)

    if not is_valid_email(draft.email_address):
        raise ValidationError(INVALID_EMAIL_MESSAGE, field="Email Address", reason=INVALID_EMAIL)

    return AdmissionDraft(
        student_name=draft.student_name.strip(),
        program_of_interest=draft.program_of_interest.strip(),
        email_address=draft.email_address.strip().lower(),
        home_address=draft.home_address.strip(),
        school_name=draft.school_name.strip(),
        consultant_name=draft.consultant_name.strip(),
        admission_status=(draft.admission_status or "").strip() or DEFAULT_ADMISSION_STATUS,
        visa_status=(draft.visa_status or "").strip() or DEFAULT_VISA_STATUS,
    )

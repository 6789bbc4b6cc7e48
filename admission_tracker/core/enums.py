from enum import Enum


class AdmissionStatus(str, Enum):
    PENDING = "Pending"
    UNDER_REVIEW = "Under Review"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    WAITLISTED = "Waitlisted"


class VisaStatus(str, Enum):
    DOCUMENTATION_IN_PROGRESS = "Documentation in progress"
    APPLICATION_SUBMITTED = "Application submitted"
    INTERVIEW_SCHEDULED = "Interview scheduled"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    NOT_APPLICABLE = "Not applicable"


class StatusField(str, Enum):
    """Columns a status edit may touch, one at a time."""

    ADMISSION_STATUS = "admission_status"
    VISA_STATUS = "visa_status"


DEFAULT_ADMISSION_STATUS = AdmissionStatus.PENDING.value
DEFAULT_VISA_STATUS = VisaStatus.DOCUMENTATION_IN_PROGRESS.value

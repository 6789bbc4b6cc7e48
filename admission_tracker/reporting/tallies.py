"""
Admission status tallies.

Status values are free text in the store, so every view needs a rule for values it does
not recognize. Two rules exist and are kept apart on purpose:

- STRICT_OTHER_BUCKET: management table and reports. Only accepted/pending/rejected are
  recognized; anything else is counted as "other".
- DEFAULT_TO_PENDING_BUCKET: consultant performance. Accepted/pending/rejected/under
  review/waitlisted are recognized; anything else (including a missing status) is
  counted as "pending".

Matching ignores case only; surrounding whitespace is part of the value.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from admission_tracker.core.schemas import AdmissionRecord

ACCEPTED = "accepted"
PENDING = "pending"
REJECTED = "rejected"
UNDER_REVIEW = "under review"
WAITLISTED = "waitlisted"
OTHER = "other"


@dataclass(frozen=True)
class UnknownStatusPolicy:
    name: str
    buckets: Tuple[str, ...]
    fallback: str

    def bucket_for(self, status: Optional[str]) -> str:
        key = (status or "").lower()
        if key in self.buckets:
            return key
        return self.fallback


STRICT_OTHER_BUCKET = UnknownStatusPolicy(
    name="StrictOtherBucket",
    buckets=(ACCEPTED, PENDING, REJECTED),
    fallback=OTHER,
)

DEFAULT_TO_PENDING_BUCKET = UnknownStatusPolicy(
    name="DefaultToPendingBucket",
    buckets=(ACCEPTED, PENDING, REJECTED, UNDER_REVIEW, WAITLISTED),
    fallback=PENDING,
)


@dataclass
class StatusTally:
    total: int = 0
    accepted: int = 0
    pending: int = 0
    rejected: int = 0
    under_review: int = 0
    waitlisted: int = 0
    other: int = 0

    def add(self, bucket: str) -> None:
        self.total += 1
        attr = bucket.replace(" ", "_")
        setattr(self, attr, getattr(self, attr) + 1)


def tally_statuses(
    records: Iterable[AdmissionRecord],
    policy: UnknownStatusPolicy = STRICT_OTHER_BUCKET,
) -> StatusTally:
    tally = StatusTally()
    for record in records:
        tally.add(policy.bucket_for(record.admission_status))
    return tally


def count_status(records: Iterable[AdmissionRecord], status: str) -> int:
    """Exact case-insensitive count for one status value, independent of any policy."""
    wanted = status.lower()
    return sum(1 for r in records if (r.admission_status or "").lower() == wanted)


def admission_status_class(status: Optional[str]) -> str:
    """Presentational class for an admission status: accepted, pending, rejected or other."""
    return STRICT_OTHER_BUCKET.bucket_for(status)


def visa_status_class(status: Optional[str]) -> str:
    """Visa statuses are matched by substring ("Visa approved" is accepted)."""
    text = (status or "").lower()
    if "approved" in text:
        return ACCEPTED
    if "submitted" in text:
        return PENDING
    if "rejected" in text:
        return REJECTED
    return OTHER

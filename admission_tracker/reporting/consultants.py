"""
Per-consultant rollup and ranking.

Each consultant gets a student count, a status breakdown (unknown statuses count as
pending) and a success rate: accepted / students as a whole percentage, rounded half up.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from admission_tracker.core.schemas import AdmissionRecord

from .tallies import DEFAULT_TO_PENDING_BUCKET, StatusTally

UNKNOWN_CONSULTANT = "Unknown Consultant"


def success_rate(accepted: int, students: int) -> int:
    """round(100 * accepted / students) with halves rounded up; 0 when there are no students."""
    if students <= 0:
        return 0
    # Integer arithmetic, so 0.5 always rounds up (e.g. 1 of 8 -> 13)
    return (200 * accepted + students) // (2 * students)


@dataclass
class ConsultantSummary:
    name: str
    tally: StatusTally = field(default_factory=StatusTally)
    rank: int = 0

    @property
    def students(self) -> int:
        return self.tally.total

    @property
    def accepted(self) -> int:
        return self.tally.accepted

    @property
    def pending(self) -> int:
        return self.tally.pending

    @property
    def rejected(self) -> int:
        return self.tally.rejected

    @property
    def under_review(self) -> int:
        return self.tally.under_review

    @property
    def waitlisted(self) -> int:
        return self.tally.waitlisted

    @property
    def success_rate(self) -> int:
        return success_rate(self.accepted, self.students)


@dataclass
class PerformanceOverview:
    total_students: int = 0
    total_accepted: int = 0
    total_pending: int = 0
    total_rejected: int = 0
    overall_success_rate: int = 0
    consultants: List[ConsultantSummary] = field(default_factory=list)


def consultant_key(name) -> str:
    return (name or "").strip() or UNKNOWN_CONSULTANT


def rollup_by_consultant(records: Iterable[AdmissionRecord]) -> List[ConsultantSummary]:
    """Group records by consultant, in order of first appearance."""
    groups: Dict[str, ConsultantSummary] = {}
    for record in records:
        key = consultant_key(record.consultant_name)
        summary = groups.get(key)
        if summary is None:
            summary = groups[key] = ConsultantSummary(name=key)
        summary.tally.add(DEFAULT_TO_PENDING_BUCKET.bucket_for(record.admission_status))
    return list(groups.values())


def rank_consultants(summaries: Iterable[ConsultantSummary]) -> List[ConsultantSummary]:
    """
    Highest success rate first, more students breaks ties. sorted() is stable, so
    consultants equal on both keys keep their input order and repeated runs agree.
    """
    ranked = sorted(summaries, key=lambda s: (-s.success_rate, -s.students))
    for position, summary in enumerate(ranked, start=1):
        summary.rank = position
    return ranked


def summarize_performance(records: Iterable[AdmissionRecord]) -> PerformanceOverview:
    consultants = rank_consultants(rollup_by_consultant(records))
    overview = PerformanceOverview(consultants=consultants)
    for c in consultants:
        overview.total_students += c.students
        overview.total_accepted += c.accepted
        overview.total_pending += c.pending
        overview.total_rejected += c.rejected
    overview.overall_success_rate = success_rate(overview.total_accepted, overview.total_students)
    return overview

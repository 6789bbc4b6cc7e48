"""Consultant rollup, success rate and ranking."""

import pytest

from admission_tracker.reporting.consultants import (
    UNKNOWN_CONSULTANT,
    rank_consultants,
    rollup_by_consultant,
    success_rate,
    summarize_performance,
)

from helpers import make_record


def rows(consultant: str, *statuses: str):
    return [make_record(consultant_name=consultant, admission_status=s) for s in statuses]


def test_success_rate_rounding() -> None:
    assert success_rate(1, 3) == 33
    assert success_rate(2, 3) == 67
    assert success_rate(1, 2) == 50
    assert success_rate(1, 8) == 13  # 12.5 rounds up
    assert success_rate(0, 0) == 0
    assert success_rate(5, 5) == 100


@pytest.mark.parametrize("students", range(1, 25))
def test_success_rate_bounds(students: int) -> None:
    for accepted in range(students + 1):
        rate = success_rate(accepted, students)
        assert 0 <= rate <= 100
        assert abs(rate - 100 * accepted / students) <= 0.5


def test_higher_success_rate_ranks_first() -> None:
    records = rows("A", "Accepted", "Pending", "Rejected") + rows("B", "Accepted", "Pending")
    ranked = rank_consultants(rollup_by_consultant(records))
    assert [(c.name, c.success_rate, c.rank) for c in ranked] == [("B", 50, 1), ("A", 33, 2)]


def test_ties_broken_by_student_count() -> None:
    records = rows("Small", "Accepted", "Pending") + rows("Large", "Accepted", "Accepted", "Pending", "Rejected")
    ranked = rank_consultants(rollup_by_consultant(records))
    assert [c.name for c in ranked] == ["Large", "Small"]


def test_exact_ties_are_deterministic() -> None:
    records = rows("X", "Accepted", "Pending") + rows("Y", "Rejected", "Accepted")
    first = [c.name for c in rank_consultants(rollup_by_consultant(records))]
    for _ in range(5):
        assert [c.name for c in rank_consultants(rollup_by_consultant(records))] == first


def test_blank_consultant_names_collapse() -> None:
    records = rows("", "Accepted") + rows("   ", "Pending") + rows("  Kofi ", "Pending") + rows("Kofi", "Accepted")
    summaries = {c.name: c for c in rollup_by_consultant(records)}
    assert set(summaries) == {UNKNOWN_CONSULTANT, "Kofi"}
    assert summaries[UNKNOWN_CONSULTANT].students == 2
    assert summaries["Kofi"].students == 2


def test_rollup_never_drops_records() -> None:
    records = (
        rows("A", "Accepted", "Under Review", "Waitlisted", "Weird", "")
        + rows("B", "Rejected", "pending", "WAITLISTED")
    )
    summaries = rollup_by_consultant(records)
    assert sum(c.students for c in summaries) == len(records)
    for c in summaries:
        assert c.accepted + c.pending + c.rejected + c.under_review + c.waitlisted == c.students


def test_summarize_performance_totals() -> None:
    records = rows("A", "Accepted", "Pending", "Rejected") + rows("B", "Accepted", "Under Review")
    overview = summarize_performance(records)
    assert overview.total_students == 5
    assert overview.total_accepted == 2
    assert overview.total_pending == 1
    assert overview.total_rejected == 1
    assert overview.overall_success_rate == 40
    assert [c.rank for c in overview.consultants] == [1, 2]


def test_summarize_empty() -> None:
    overview = summarize_performance([])
    assert overview.consultants == []
    assert overview.overall_success_rate == 0

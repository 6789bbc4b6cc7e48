"""Status tallies under the two unknown-status policies, and presentational classes."""

import pytest

from admission_tracker.reporting.tallies import (
    DEFAULT_TO_PENDING_BUCKET,
    STRICT_OTHER_BUCKET,
    admission_status_class,
    tally_statuses,
    visa_status_class,
)

from helpers import make_record


def statuses(*values):
    return [make_record(admission_status=v) for v in values]


def test_case_insensitive_counts() -> None:
    tally = tally_statuses(statuses("Accepted", "accepted", "Pending", "Rejected"))
    assert (tally.accepted, tally.pending, tally.rejected) == (2, 1, 1)
    assert tally.total == 4


def test_strict_policy_counts_unknown_as_other() -> None:
    tally = tally_statuses(statuses("Under Review", "Waitlisted", "Deferred", "ACCEPTED"), STRICT_OTHER_BUCKET)
    assert tally.accepted == 1
    assert tally.other == 3
    assert tally.pending == 0


def test_default_to_pending_policy() -> None:
    tally = tally_statuses(
        statuses("Under Review", "waitlisted", "Deferred", None, "Accepted"),
        DEFAULT_TO_PENDING_BUCKET,
    )
    assert tally.under_review == 1
    assert tally.waitlisted == 1
    assert tally.pending == 2  # "Deferred" and missing
    assert tally.accepted == 1
    assert tally.other == 0


@pytest.mark.parametrize("policy", [STRICT_OTHER_BUCKET, DEFAULT_TO_PENDING_BUCKET])
def test_buckets_sum_to_total(policy) -> None:
    tally = tally_statuses(
        statuses("Accepted", "pending", "REJECTED", "Under Review", "Waitlisted", "???", "", None),
        policy,
    )
    buckets = tally.accepted + tally.pending + tally.rejected + tally.under_review + tally.waitlisted + tally.other
    assert buckets == tally.total == 8


def test_empty_tally() -> None:
    tally = tally_statuses([])
    assert tally.total == 0
    assert tally.other == 0


@pytest.mark.parametrize(
    "status, expected",
    [("Accepted", "accepted"), ("PENDING", "pending"), ("rejected", "rejected"), ("Under Review", "other"), (None, "other")],
)
def test_admission_status_class(status, expected) -> None:
    assert admission_status_class(status) == expected


@pytest.mark.parametrize(
    "status, expected",
    [
        ("Approved", "accepted"),
        ("Visa approved after interview", "accepted"),
        ("Application submitted", "pending"),
        ("Rejected", "rejected"),
        ("Interview scheduled", "other"),
        ("Not applicable", "other"),
        (None, "other"),
    ],
)
def test_visa_status_class_uses_substrings(status, expected) -> None:
    assert visa_status_class(status) == expected


def test_surrounding_whitespace_is_not_ignored() -> None:
    strict = tally_statuses(statuses("Accepted ", " pending"), STRICT_OTHER_BUCKET)
    assert (strict.accepted, strict.pending, strict.other) == (0, 0, 2)
    lenient = tally_statuses(statuses("Accepted "), DEFAULT_TO_PENDING_BUCKET)
    assert (lenient.accepted, lenient.pending) == (0, 1)

"""
Time-window filters over admission records.

A filter selection is a calendar month ("YYYY-MM"), an inclusive date range, or nothing.
Month and range are mutually exclusive; when both are given the month wins.
"""

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo
from typing import Iterable, List, Optional, Tuple, Union
from zoneinfo import ZoneInfo

from admission_tracker.core.schemas import AdmissionRecord

ALL_TIME_LABEL = "All time"
MONTH_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")

DateLike = Union[date, str, None]


def resolve_timezone(name: Optional[str]) -> tzinfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def as_utc(value: datetime) -> datetime:
    """Stores without tz support (SQLite) hand back naive datetimes; those are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_month(month: str) -> Tuple[int, int]:
    """'2026-10' -> (2026, 10). Raises ValueError on anything else."""
    if not isinstance(month, str) or not MONTH_PATTERN.fullmatch(month.strip()):
        raise ValueError(f"Invalid month {month!r}; expected YYYY-MM")
    year_str, month_str = month.strip().split("-")
    year, month_no = int(year_str), int(month_str)
    if not 1 <= month_no <= 12:
        raise ValueError(f"Invalid month {month!r}; expected YYYY-MM")
    return year, month_no


def _as_date(value: DateLike) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip())


def month_label(month: str) -> str:
    """'2026-10' -> 'October 2026'."""
    year, month_no = parse_month(month)
    return f"{calendar.month_name[month_no]} {year}"


def month_bounds(month: str, tz: tzinfo = timezone.utc) -> Tuple[datetime, datetime]:
    """First and last instant (inclusive) of a calendar month in the given zone."""
    year, month_no = parse_month(month)
    last_day = calendar.monthrange(year, month_no)[1]
    start = datetime.combine(date(year, month_no, 1), time.min, tzinfo=tz)
    end = datetime.combine(date(year, month_no, last_day), time.max, tzinfo=tz)
    return start, end


def current_month(tz: tzinfo = timezone.utc, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    local = now.astimezone(tz)
    return f"{local.year}-{local.month:02d}"


@dataclass(frozen=True)
class FilterSelection:
    month: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @classmethod
    def of(
        cls,
        month: Optional[str] = None,
        start_date: DateLike = None,
        end_date: DateLike = None,
    ) -> "FilterSelection":
        """Normalize raw query values. Month takes precedence; a range needs both ends."""
        month = (month or "").strip() or None
        if month:
            parse_month(month)
            return cls(month=month)
        start, end = _as_date(start_date), _as_date(end_date)
        if start and end:
            return cls(start_date=start, end_date=end)
        return cls()

    def with_month(self, month: str) -> "FilterSelection":
        return FilterSelection.of(month=month)

    def with_range(self, start_date: DateLike, end_date: DateLike) -> "FilterSelection":
        return FilterSelection.of(start_date=start_date, end_date=end_date)

    @property
    def is_month(self) -> bool:
        return self.month is not None

    @property
    def is_range(self) -> bool:
        return self.month is None and self.start_date is not None and self.end_date is not None

    def label(self) -> str:
        if self.is_month:
            return month_label(self.month)
        if self.is_range:
            return f"{self.start_date.isoformat()} to {self.end_date.isoformat()}"
        return ALL_TIME_LABEL

    def matches(self, record: AdmissionRecord, tz: tzinfo = timezone.utc) -> bool:
        created = as_utc(record.created_at)
        if self.is_month:
            local = created.astimezone(tz)
            return f"{local.year}-{local.month:02d}" == self.month
        if self.is_range:
            # Compared as ISO date strings of the UTC calendar day; time of day is ignored
            day = created.date().isoformat()
            return self.start_date.isoformat() <= day <= self.end_date.isoformat()
        return True


def filter_records(
    records: Iterable[AdmissionRecord],
    selection: FilterSelection,
    tz: tzinfo = timezone.utc,
) -> List[AdmissionRecord]:
    """Keep the records inside the selection, preserving store order."""
    return [r for r in records if selection.matches(r, tz)]

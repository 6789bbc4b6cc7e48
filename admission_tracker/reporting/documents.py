"""
Report documents for a filtered set of admissions: a printable HTML page and a
structured summary that a delivery channel can send. Pure: no I/O happens here.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone, tzinfo
from html import escape
from typing import Iterable, List, Optional

from admission_tracker.core.schemas import AdmissionRecord

from .filters import FilterSelection, as_utc, parse_month
from .tallies import (
    STRICT_OTHER_BUCKET,
    UNDER_REVIEW,
    admission_status_class,
    count_status,
    tally_statuses,
    visa_status_class,
)

NOT_AVAILABLE = "N/A"
DEFAULT_REPORT_ID_PREFIX = "AAM"

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_STYLE = """
    * { margin: 0; padding: 0; box-sizing: border-box; }
    body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
           margin: 20px; color: #333; background: #ffffff; font-size: 14px; line-height: 1.5; }
    .header { text-align: center; margin-bottom: 30px; border-bottom: 3px solid #059669; padding-bottom: 20px; }
    .title { color: #059669; font-size: 28px; font-weight: bold; margin-bottom: 10px; }
    .date { color: #666; font-size: 14px; margin: 5px 0; }
    .summary { margin: 30px 0; padding: 25px; background: #f0fdf4; border-radius: 12px; border: 1px solid #d1fae5; }
    .summary h3 { color: #059669; margin-bottom: 20px; font-size: 20px; }
    .stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 15px; }
    .stat { background: white; padding: 20px; border-radius: 10px; border-left: 5px solid #059669; }
    .stat-number { font-size: 32px; font-weight: bold; color: #059669; display: block; }
    .stat-label { font-size: 12px; color: #666; text-transform: uppercase; font-weight: 600; margin-top: 5px; }
    table { width: 100%; border-collapse: collapse; margin-top: 30px; background: white; }
    th, td { border: 1px solid #e5e7eb; padding: 12px 8px; text-align: left; font-size: 13px; }
    th { background: #059669; color: white; font-weight: 600; font-size: 12px; text-transform: uppercase; }
    tr:nth-child(even) { background: #f9fafb; }
    .status-accepted, .status-pending, .status-rejected, .status-other {
      padding: 4px 8px; border-radius: 6px; font-size: 11px; font-weight: 600; display: inline-block; }
    .status-accepted { background: #dcfce7; color: #166534; }
    .status-pending { background: #fef3c7; color: #92400e; }
    .status-rejected { background: #fee2e2; color: #991b1b; }
    .status-other { background: #dbeafe; color: #1e40af; }
    .student-name { font-weight: 600; color: #111827; }
    .footer { margin-top: 50px; text-align: center; color: #666; font-size: 12px;
              border-top: 1px solid #e5e7eb; padding-top: 20px; }
    @media print {
      body { margin: 0; font-size: 12px; }
      tr { page-break-inside: avoid; }
    }
"""

_COLUMNS = (
    "Student Name",
    "Program",
    "Email",
    "Address",
    "School",
    "Consultant",
    "Admission Status",
    "Visa Status",
    "Date Applied",
)


@dataclass
class ReportRow:
    student_name: str
    program: str
    email: str
    address: str
    school: str
    consultant: str
    admission_status: str
    visa_status: str
    date_applied: str


@dataclass
class ReportSummary:
    total: int
    accepted: int
    pending: int
    rejected: int
    under_review: int
    acceptance_rate: str
    period: str
    generated_at: datetime
    report_id: str
    applications: List[ReportRow] = field(default_factory=list)


@dataclass
class ReportDocument:
    html: str
    summary: ReportSummary
    filename: str


def _text(value: Optional[str]) -> str:
    value = (value or "").strip()
    return value or NOT_AVAILABLE


def format_short_date(value: datetime) -> str:
    """US style M/D/YYYY without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"


def format_acceptance_rate(accepted: int, total: int) -> str:
    """Percentage with one decimal; plain "0" when there is nothing to rate."""
    if total <= 0:
        return "0"
    return f"{accepted / total * 100:.1f}"


def make_report_id(generated_at: datetime, prefix: str = DEFAULT_REPORT_ID_PREFIX) -> str:
    millis = int(as_utc(generated_at).timestamp() * 1000)
    return f"{prefix}-{millis}"


def report_filename(selection: FilterSelection, generated_at: datetime, tz: tzinfo = timezone.utc) -> str:
    stamp = as_utc(generated_at).astimezone(tz).strftime("%Y-%m-%d-%H-%M-%S")
    name = f"admission-report-{stamp}"
    if selection.is_month:
        year, month_no = parse_month(selection.month)
        name += f"-{_MONTH_ABBR[month_no - 1]}-{year}"
    elif selection.is_range:
        name += f"-{selection.start_date.isoformat()}-to-{selection.end_date.isoformat()}"
    return f"{name}.html"


def build_rows(records: Iterable[AdmissionRecord], tz: tzinfo = timezone.utc) -> List[ReportRow]:
    return [
        ReportRow(
            student_name=_text(r.student_name),
            program=_text(r.program_of_interest),
            email=_text(r.email_address),
            address=_text(r.home_address),
            school=_text(r.school_name),
            consultant=_text(r.consultant_name),
            admission_status=_text(r.admission_status),
            visa_status=_text(r.visa_status),
            date_applied=format_short_date(as_utc(r.created_at).astimezone(tz)),
        )
        for r in records
    ]


def build_report_summary(
    records: List[AdmissionRecord],
    selection: FilterSelection,
    generated_at: datetime,
    tz: tzinfo = timezone.utc,
    report_id_prefix: str = DEFAULT_REPORT_ID_PREFIX,
) -> ReportSummary:
    tally = tally_statuses(records, STRICT_OTHER_BUCKET)
    return ReportSummary(
        total=tally.total,
        accepted=tally.accepted,
        pending=tally.pending,
        rejected=tally.rejected,
        under_review=count_status(records, UNDER_REVIEW),
        acceptance_rate=format_acceptance_rate(tally.accepted, tally.total),
        period=selection.label(),
        generated_at=generated_at,
        report_id=make_report_id(generated_at, report_id_prefix),
        applications=build_rows(records, tz),
    )


def _render_row(record: AdmissionRecord, row: ReportRow) -> str:
    admission_class = admission_status_class(record.admission_status)
    visa_class = visa_status_class(record.visa_status)
    return (
        "        <tr>\n"
        f'          <td><span class="student-name">{escape(row.student_name)}</span></td>\n'
        f"          <td>{escape(row.program)}</td>\n"
        f"          <td>{escape(row.email)}</td>\n"
        f"          <td>{escape(row.address)}</td>\n"
        f"          <td>{escape(row.school)}</td>\n"
        f"          <td>{escape(row.consultant)}</td>\n"
        f'          <td><span class="status-{admission_class}">{escape(row.admission_status)}</span></td>\n'
        f'          <td><span class="status-{visa_class}">{escape(row.visa_status)}</span></td>\n'
        f"          <td>{escape(row.date_applied)}</td>\n"
        "        </tr>\n"
    )


def render_report_html(
    records: List[AdmissionRecord],
    summary: ReportSummary,
    selection: FilterSelection,
    tz: tzinfo = timezone.utc,
) -> str:
    period_line = ""
    if selection.is_month:
        period_line = f'    <div class="date">Month: {escape(summary.period)}</div>\n'
    elif selection.is_range:
        period_line = f'    <div class="date">Period: {escape(summary.period)}</div>\n'

    stats = (
        (summary.total, "Total Applications"),
        (summary.accepted, "Accepted"),
        (summary.pending, "Pending"),
        (summary.rejected, "Rejected"),
    )
    stat_blocks = "".join(
        '      <div class="stat">\n'
        f'        <span class="stat-number">{value}</span>\n'
        f'        <div class="stat-label">{label}</div>\n'
        "      </div>\n"
        for value, label in stats
    )
    header_cells = "".join(f"          <th>{c}</th>\n" for c in _COLUMNS)
    body_rows = "".join(_render_row(r, row) for r, row in zip(records, summary.applications))
    generated_on = format_short_date(as_utc(summary.generated_at).astimezone(tz))

    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        "  <title>Admission Applications Report</title>\n"
        f"  <style>{_STYLE}  </style>\n"
        "</head>\n"
        "<body>\n"
        '  <div class="header">\n'
        '    <div class="title">Admission Applications Report</div>\n'
        f'    <div class="date">Generated on {generated_on}</div>\n'
        f"{period_line}"
        "  </div>\n"
        '  <div class="summary">\n'
        "    <h3>Summary Statistics</h3>\n"
        '    <div class="stats">\n'
        f"{stat_blocks}"
        "    </div>\n"
        "  </div>\n"
        "  <table>\n"
        "    <thead>\n"
        "        <tr>\n"
        f"{header_cells}"
        "        </tr>\n"
        "    </thead>\n"
        f"    <tbody>\n{body_rows}    </tbody>\n"
        "  </table>\n"
        '  <div class="footer">\n'
        "    <p><strong>Admission Application Management System</strong></p>\n"
        f"    <p>This report contains {summary.total} applications with a "
        f"{summary.acceptance_rate}% acceptance rate</p>\n"
        "    <p>For inquiries, please contact the admissions office</p>\n"
        f'    <p class="report-id">Report ID: {escape(summary.report_id)}</p>\n'
        "  </div>\n"
        "</body>\n"
        "</html>\n"
    )


def synthesize_report(
    records: List[AdmissionRecord],
    selection: FilterSelection,
    generated_at: Optional[datetime] = None,
    tz: tzinfo = timezone.utc,
    report_id_prefix: str = DEFAULT_REPORT_ID_PREFIX,
) -> ReportDocument:
    """Records (already filtered, store order) + active filter -> HTML page and summary."""
    generated_at = generated_at or datetime.now(timezone.utc)
    summary = build_report_summary(records, selection, generated_at, tz, report_id_prefix)
    return ReportDocument(
        html=render_report_html(records, summary, selection, tz),
        summary=summary,
        filename=report_filename(selection, generated_at, tz),
    )

"""
Admission applications: intake, the filtered management view, single-field status edits
and report documents. Every store call goes through RecordStoreGateway.
"""

import logging
from datetime import date, datetime, timezone, tzinfo
from typing import List, Optional
from uuid import UUID

from fastapi import status

from admission_tracker.core.config import settings
from admission_tracker.core.enums import AdmissionStatus, VisaStatus
from admission_tracker.core.exceptions import DeliveryError, GatewayError, ServiceError, ValidationError
from admission_tracker.core.schemas import AdmissionRecord
from admission_tracker.gateway.base import RecordStoreGateway
from admission_tracker.reporting.delivery import DeliveryChannel
from admission_tracker.reporting.documents import ReportDocument, synthesize_report
from admission_tracker.reporting.filters import FilterSelection, filter_records
from admission_tracker.reporting.tallies import STRICT_OTHER_BUCKET, tally_statuses

from .schemas import (
    AdmissionDraft,
    AdmissionListResponse,
    AdmissionResponse,
    FilterInfo,
    ManagementStats,
    ReportEmailRequest,
    ReportEmailResponse,
    ReportSummaryResponse,
    StatusOptionsResponse,
    StatusUpdate,
)
from .status_editor import StatusEditor
from .validator import INVALID_EMAIL, is_valid_email, validate_admission_draft

logger = logging.getLogger(__name__)

NO_APPLICATIONS_TO_DOWNLOAD = "No applications to download"
NO_APPLICATIONS_TO_SEND = "No applications to send"


def _to_response(r: AdmissionRecord) -> AdmissionResponse:
    return AdmissionResponse(**r.model_dump())


def build_selection(
    month: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> FilterSelection:
    try:
        return FilterSelection.of(month=month, start_date=start_date, end_date=end_date)
    except ValueError as e:
        raise ServiceError(str(e), status.HTTP_400_BAD_REQUEST)


def status_options() -> StatusOptionsResponse:
    return StatusOptionsResponse(
        admission_statuses=[s.value for s in AdmissionStatus],
        visa_statuses=[s.value for s in VisaStatus],
    )


async def create_admission(gateway: RecordStoreGateway, draft: AdmissionDraft) -> AdmissionResponse:
    """Validate the intake form and insert it. Validation failures never reach the store."""
    clean = validate_admission_draft(draft)
    try:
        inserted = await gateway.insert(clean.model_dump())
    except GatewayError as e:
        raise GatewayError(e.user_message("Failed to save application."), e.category) from e
    if not inserted:
        raise GatewayError("Failed to save application. Please try again.")
    record = inserted[0]
    logger.info("Admission %s created for consultant %r", record.id, record.consultant_name)
    return _to_response(record)


async def _fetch_filtered(
    gateway: RecordStoreGateway,
    selection: FilterSelection,
    tz: tzinfo,
) -> List[AdmissionRecord]:
    try:
        records = await gateway.select_all()
    except GatewayError as e:
        raise GatewayError(e.user_message("Failed to load applications."), e.category) from e
    return filter_records(records, selection, tz)


async def list_admissions(
    gateway: RecordStoreGateway,
    selection: FilterSelection,
    tz: tzinfo = timezone.utc,
) -> AdmissionListResponse:
    """Management view: filtered applications (newest first) and their status counts."""
    records = await _fetch_filtered(gateway, selection, tz)
    tally = tally_statuses(records, STRICT_OTHER_BUCKET)
    return AdmissionListResponse(
        period=selection.label(),
        filter=FilterInfo(
            month=selection.month,
            start_date=selection.start_date,
            end_date=selection.end_date,
        ),
        stats=ManagementStats(
            total=tally.total,
            accepted=tally.accepted,
            pending=tally.pending,
            rejected=tally.rejected,
            other=tally.other,
        ),
        applications=[_to_response(r) for r in records],
    )


async def update_status(
    gateway: RecordStoreGateway,
    record_id: UUID,
    payload: StatusUpdate,
) -> AdmissionResponse:
    """Change admission_status or visa_status of one application."""
    if not payload.value.strip():
        raise ServiceError("Status value is required", status.HTTP_400_BAD_REQUEST)

    try:
        current = await gateway.get(record_id)
    except GatewayError as e:
        raise GatewayError(e.user_message("Failed to update status."), e.category) from e
    if current is None:
        raise ServiceError("Admission application not found", status.HTTP_404_NOT_FOUND)

    editor = StatusEditor(gateway, [current])
    editor.begin_edit(record_id, payload.field, getattr(current, payload.field.value))
    editor.set_draft(payload.value)
    try:
        updated = await editor.save()
    except GatewayError as e:
        raise GatewayError(e.user_message("Failed to update status."), e.category) from e
    return _to_response(updated or editor.records[0])


async def build_report(
    gateway: RecordStoreGateway,
    selection: FilterSelection,
    tz: tzinfo = timezone.utc,
    generated_at: Optional[datetime] = None,
) -> ReportDocument:
    records = await _fetch_filtered(gateway, selection, tz)
    if not records:
        raise ServiceError(NO_APPLICATIONS_TO_DOWNLOAD, status.HTTP_400_BAD_REQUEST)
    return synthesize_report(
        records,
        selection,
        generated_at=generated_at,
        tz=tz,
        report_id_prefix=settings.report_id_prefix,
    )


async def email_report(
    gateway: RecordStoreGateway,
    channel: DeliveryChannel,
    payload: ReportEmailRequest,
    tz: tzinfo = timezone.utc,
) -> ReportEmailResponse:
    recipient = payload.recipient.strip()
    if not is_valid_email(recipient):
        raise ValidationError(
            "Please enter a valid email address format", field="Recipient", reason=INVALID_EMAIL
        )
    selection = build_selection(payload.month, payload.start_date, payload.end_date)
    records = await _fetch_filtered(gateway, selection, tz)
    if not records:
        raise ServiceError(NO_APPLICATIONS_TO_SEND, status.HTTP_400_BAD_REQUEST)

    document = synthesize_report(records, selection, tz=tz, report_id_prefix=settings.report_id_prefix)
    try:
        await channel.deliver(recipient, document.summary)
    except DeliveryError as e:
        logger.warning("Report %s delivery to %s failed: %s", document.summary.report_id, recipient, e.message)
        raise DeliveryError(f"Failed to send email report. {e.message}") from e

    return ReportEmailResponse(
        success=True,
        message=f"Report successfully sent to {recipient}",
        summary=ReportSummaryResponse.model_validate(document.summary, from_attributes=True),
    )

from datetime import date, tzinfo
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from admission_tracker.api.v1.dependencies import (
    get_delivery_channel,
    get_document_renderer,
    get_record_store,
    get_report_timezone,
)
from admission_tracker.auth.dependencies import require_operator
from admission_tracker.core.exceptions import ServiceError
from admission_tracker.gateway.base import RecordStoreGateway
from admission_tracker.reporting.delivery import DeliveryChannel
from admission_tracker.reporting.renderers import DocumentRenderer

from .schemas import (
    AdmissionDraft,
    AdmissionListResponse,
    AdmissionResponse,
    ReportEmailRequest,
    ReportEmailResponse,
    StatusOptionsResponse,
    StatusUpdate,
)
from . import service

router = APIRouter(
    prefix="/api/v1/admissions",
    tags=["admissions"],
    dependencies=[Depends(require_operator)],
)

MONTH_QUERY = Query(None, description="Calendar month YYYY-MM; overrides start_date/end_date")


# ----- Intake -----

@router.get("/statuses", response_model=StatusOptionsResponse)
async def list_status_options() -> StatusOptionsResponse:
    """Known admission and visa status values for form dropdowns. Stored values may be anything."""
    return service.status_options()


@router.post(
    "",
    response_model=AdmissionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_admission(
    payload: AdmissionDraft,
    gateway: RecordStoreGateway = Depends(get_record_store),
) -> AdmissionResponse:
    """Submit the intake form. Text fields are trimmed and the email lower-cased."""
    try:
        return await service.create_admission(gateway, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


# ----- Management view -----

@router.get("", response_model=AdmissionListResponse)
async def list_admissions(
    month: Optional[str] = MONTH_QUERY,
    start_date: Optional[date] = Query(None, description="Inclusive start; needs end_date"),
    end_date: Optional[date] = Query(None, description="Inclusive end; needs start_date"),
    gateway: RecordStoreGateway = Depends(get_record_store),
    tz: tzinfo = Depends(get_report_timezone),
) -> AdmissionListResponse:
    """Applications newest first, filtered by month or date range, with status counts."""
    try:
        selection = service.build_selection(month, start_date, end_date)
        return await service.list_admissions(gateway, selection, tz)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.patch("/{admission_id}/status", response_model=AdmissionResponse)
async def update_admission_status(
    admission_id: UUID,
    payload: StatusUpdate,
    gateway: RecordStoreGateway = Depends(get_record_store),
) -> AdmissionResponse:
    """Change admission_status or visa_status (one field per call)."""
    try:
        return await service.update_status(gateway, admission_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


# ----- Reports -----

@router.get("/report")
async def download_report(
    month: Optional[str] = MONTH_QUERY,
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    gateway: RecordStoreGateway = Depends(get_record_store),
    renderer: DocumentRenderer = Depends(get_document_renderer),
    tz: tzinfo = Depends(get_report_timezone),
) -> Response:
    """Printable report of the filtered applications as a file download."""
    try:
        selection = service.build_selection(month, start_date, end_date)
        document = await service.build_report(gateway, selection, tz)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    rendered = renderer.render(document)
    return Response(
        content=rendered.content,
        media_type=rendered.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{rendered.filename}"',
            "X-Report-Id": document.summary.report_id,
        },
    )


@router.post("/report/email", response_model=ReportEmailResponse)
async def email_report(
    payload: ReportEmailRequest,
    gateway: RecordStoreGateway = Depends(get_record_store),
    channel: DeliveryChannel = Depends(get_delivery_channel),
    tz: tzinfo = Depends(get_report_timezone),
) -> ReportEmailResponse:
    """Send the report summary for the filtered applications to one recipient."""
    try:
        return await service.email_report(gateway, channel, payload, tz)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

"""Consultant performance for one calendar month: ranked rollup plus overall totals."""

from datetime import timezone, tzinfo
from typing import Optional

from fastapi import status

from admission_tracker.core.exceptions import GatewayError, ServiceError
from admission_tracker.gateway.base import RecordStoreGateway
from admission_tracker.reporting.consultants import summarize_performance
from admission_tracker.reporting.filters import (
    FilterSelection,
    as_utc,
    current_month,
    filter_records,
    month_bounds,
    month_label,
)

from .schemas import (
    ConsultantPerformanceItem,
    ConsultantPerformanceResponse,
    PerformanceOverviewResponse,
)


async def get_consultant_performance(
    gateway: RecordStoreGateway,
    month: Optional[str] = None,
    tz: tzinfo = timezone.utc,
) -> ConsultantPerformanceResponse:
    month = (month or "").strip() or current_month(tz)
    try:
        selection = FilterSelection.of(month=month)
        start, end = month_bounds(month, tz)
    except ValueError as e:
        raise ServiceError(str(e), status.HTTP_400_BAD_REQUEST)

    try:
        records = await gateway.select_range(as_utc(start), as_utc(end))
    except GatewayError as e:
        raise GatewayError(e.user_message("Failed to load consultant performance data."), e.category) from e

    overview = summarize_performance(filter_records(records, selection, tz))
    return ConsultantPerformanceResponse(
        month=month,
        month_label=month_label(month),
        overview=PerformanceOverviewResponse(
            total_students=overview.total_students,
            total_accepted=overview.total_accepted,
            total_pending=overview.total_pending,
            total_rejected=overview.total_rejected,
            overall_success_rate=overview.overall_success_rate,
        ),
        consultants=[
            ConsultantPerformanceItem.model_validate(c, from_attributes=True)
            for c in overview.consultants
        ],
    )

from datetime import tzinfo
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from admission_tracker.api.v1.dependencies import get_record_store, get_report_timezone
from admission_tracker.auth.dependencies import require_operator
from admission_tracker.core.exceptions import ServiceError
from admission_tracker.gateway.base import RecordStoreGateway

from .schemas import ConsultantPerformanceResponse
from . import service

router = APIRouter(
    prefix="/api/v1/consultants",
    tags=["consultants"],
    dependencies=[Depends(require_operator)],
)


@router.get("/performance", response_model=ConsultantPerformanceResponse)
async def get_consultant_performance(
    month: Optional[str] = Query(None, description="Calendar month YYYY-MM; defaults to the current month"),
    gateway: RecordStoreGateway = Depends(get_record_store),
    tz: tzinfo = Depends(get_report_timezone),
) -> ConsultantPerformanceResponse:
    """Consultants ranked by success rate, then by number of students."""
    try:
        return await service.get_consultant_performance(gateway, month, tz)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

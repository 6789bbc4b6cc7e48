from fastapi import APIRouter, Depends

from admission_tracker.api.v1.dependencies import get_record_store
from admission_tracker.gateway.base import RecordStoreGateway

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("")
async def health(gateway: RecordStoreGateway = Depends(get_record_store)) -> dict:
    """Liveness plus a trivial query against the admissions table."""
    database_ok = await gateway.ping()
    return {"status": "ok" if database_ok else "degraded", "database": database_ok}

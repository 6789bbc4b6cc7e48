"""
RecordStoreGateway over an async SQLAlchemy session (PostgreSQL in production, SQLite in tests).
SQLAlchemy errors never leave this module: they are rolled back and re-raised as GatewayError.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from admission_tracker.core.exceptions import (
    GATEWAY_DUPLICATE,
    GATEWAY_NETWORK,
    GatewayError,
)
from admission_tracker.core.models import Admission
from admission_tracker.core.schemas import AdmissionRecord

from .base import RecordStoreGateway

logger = logging.getLogger(__name__)

INSERTABLE_FIELDS = (
    "student_name",
    "program_of_interest",
    "email_address",
    "home_address",
    "school_name",
    "consultant_name",
    "admission_status",
    "visa_status",
)
UPDATABLE_FIELDS = ("admission_status", "visa_status")


def _to_gateway_error(exc: SQLAlchemyError) -> GatewayError:
    message = str(getattr(exc, "orig", None) or exc)
    if isinstance(exc, IntegrityError):
        lowered = message.lower()
        if "unique" in lowered or "duplicate" in lowered:
            return GatewayError(message, GATEWAY_DUPLICATE)
    if isinstance(exc, OperationalError) or (
        isinstance(exc, DBAPIError) and exc.connection_invalidated
    ):
        return GatewayError(message, GATEWAY_NETWORK)
    # Category picked from message text (e.g. "permission denied for table admissions")
    return GatewayError(message)


class SqlAlchemyRecordStore(RecordStoreGateway):
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def _fail(self, exc: SQLAlchemyError, operation: str) -> GatewayError:
        await self.db.rollback()
        error = _to_gateway_error(exc)
        logger.warning("admissions %s failed (%s): %s", operation, error.category, error.message)
        return error

    async def insert(self, record: Mapping[str, Any]) -> List[AdmissionRecord]:
        values = {k: record[k] for k in INSERTABLE_FIELDS if record.get(k) is not None}
        row = Admission(**values)
        try:
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "insert") from exc
        return [AdmissionRecord.model_validate(row)]

    async def select_all(self) -> List[AdmissionRecord]:
        stmt = select(Admission).order_by(Admission.created_at.desc())
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "select") from exc
        return [AdmissionRecord.model_validate(r) for r in result.scalars().all()]

    async def select_range(self, gte: datetime, lte: datetime) -> List[AdmissionRecord]:
        stmt = (
            select(Admission)
            .where(Admission.created_at >= gte, Admission.created_at <= lte)
            .order_by(Admission.created_at.desc())
        )
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "select range") from exc
        return [AdmissionRecord.model_validate(r) for r in result.scalars().all()]

    async def update(self, record_id: UUID, values: Dict[str, Any]) -> List[AdmissionRecord]:
        unknown = set(values) - set(UPDATABLE_FIELDS)
        if unknown:
            raise GatewayError(f"permission denied for column(s): {', '.join(sorted(unknown))}")
        try:
            row = await self.db.get(Admission, record_id)
            if row is None:
                return []
            for field, value in values.items():
                setattr(row, field, value)
            await self.db.commit()
            await self.db.refresh(row)
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "update") from exc
        return [AdmissionRecord.model_validate(row)]

    async def get(self, record_id: UUID) -> Optional[AdmissionRecord]:
        try:
            row = await self.db.get(Admission, record_id)
        except SQLAlchemyError as exc:
            raise await self._fail(exc, "get") from exc
        return AdmissionRecord.model_validate(row) if row else None

    async def ping(self) -> bool:
        try:
            await self.db.execute(select(func.count()).select_from(Admission))
        except SQLAlchemyError as exc:
            logger.error("Database connection error: %s", exc)
            await self.db.rollback()
            return False
        return True

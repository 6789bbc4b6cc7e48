"""
Record store contract. The reporting engine and the admissions service only talk to
this interface; any store (SQL database, hosted row store, in-memory fake) can back it.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional
from uuid import UUID

from admission_tracker.core.schemas import AdmissionRecord


class RecordStoreGateway(ABC):
    """Async access to the admissions table. Every failure raises GatewayError."""

    @abstractmethod
    async def insert(self, record: Mapping[str, Any]) -> List[AdmissionRecord]:
        """Insert one record; returns the inserted rows with store-assigned id and timestamps."""

    @abstractmethod
    async def select_all(self) -> List[AdmissionRecord]:
        """All records, newest first (created_at desc)."""

    @abstractmethod
    async def select_range(self, gte: datetime, lte: datetime) -> List[AdmissionRecord]:
        """Records with gte <= created_at <= lte, newest first."""

    @abstractmethod
    async def update(self, record_id: UUID, values: Dict[str, Any]) -> List[AdmissionRecord]:
        """Apply values to one record; returns the updated rows (empty when id is unknown)."""

    @abstractmethod
    async def get(self, record_id: UUID) -> Optional[AdmissionRecord]:
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """True when the store answers a trivial query."""

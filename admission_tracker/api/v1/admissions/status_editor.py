"""
Single-field status editing: stage a draft value for one field of one record, then
commit it through the record store or discard it.

IDLE -> EDITING(id, field, draft) -> COMMITTING -> IDLE
"""

import logging
from enum import Enum
from typing import List, Optional, Union
from uuid import UUID

from admission_tracker.core.enums import StatusField
from admission_tracker.core.exceptions import GATEWAY_NOT_FOUND, GatewayError
from admission_tracker.core.schemas import AdmissionRecord
from admission_tracker.gateway.base import RecordStoreGateway

logger = logging.getLogger(__name__)


class EditorState(str, Enum):
    IDLE = "idle"
    EDITING = "editing"
    COMMITTING = "committing"


class StatusEditor:
    """
    Holds at most one pending edit. Starting a new edit replaces the previous one.
    On a successful save the new value is merged into `records` in place; on failure
    `records` is left as it was and the GatewayError propagates.
    """

    def __init__(self, gateway: RecordStoreGateway, records: Optional[List[AdmissionRecord]] = None) -> None:
        self.gateway = gateway
        self.records: List[AdmissionRecord] = records if records is not None else []
        self.state = EditorState.IDLE
        self.record_id: Optional[UUID] = None
        self.field: Optional[StatusField] = None
        self.draft_value = ""

    def begin_edit(self, record_id: UUID, field: Union[StatusField, str], current_value: Optional[str]) -> None:
        if self.state == EditorState.COMMITTING:
            raise RuntimeError("A status change is already being saved")
        self.record_id = record_id
        self.field = StatusField(field)
        self.draft_value = current_value or ""
        self.state = EditorState.EDITING

    def set_draft(self, value: str) -> None:
        if self.state != EditorState.EDITING:
            raise RuntimeError("No status edit in progress")
        self.draft_value = value

    def cancel(self) -> None:
        self._reset()

    async def save(self) -> Optional[AdmissionRecord]:
        """Commit the draft. Returns the updated record, or None when there was nothing to save."""
        if self.state != EditorState.EDITING:
            return None
        value = self.draft_value.strip()
        if not value:
            return None

        record_id, field = self.record_id, self.field
        self.state = EditorState.COMMITTING
        try:
            updated = await self.gateway.update(record_id, {field.value: value})
            if not updated:
                raise GatewayError(f"No admission with id {record_id}", GATEWAY_NOT_FOUND)
        finally:
            self._reset()

        self._merge(record_id, field, value)
        logger.info("Admission %s: %s set to %r", record_id, field.value, value)
        return updated[0]

    def _merge(self, record_id: UUID, field: StatusField, value: str) -> None:
        for index, record in enumerate(self.records):
            if record.id == record_id:
                self.records[index] = record.model_copy(update={field.value: value})

    def _reset(self) -> None:
        self.state = EditorState.IDLE
        self.record_id = None
        self.field = None
        self.draft_value = ""

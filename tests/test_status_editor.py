"""Status editor state machine against an in-memory record store."""

import uuid
from typing import Any, Dict, List, Optional

import pytest

from admission_tracker.api.v1.admissions.status_editor import EditorState, StatusEditor
from admission_tracker.core.exceptions import GATEWAY_NETWORK, GATEWAY_NOT_FOUND, GatewayError
from admission_tracker.core.schemas import AdmissionRecord
from admission_tracker.gateway.base import RecordStoreGateway

from helpers import make_record


class FakeRecordStore(RecordStoreGateway):
    def __init__(self, records: List[AdmissionRecord], fail_with: Optional[str] = None) -> None:
        self.rows = {r.id: r for r in records}
        self.fail_with = fail_with
        self.update_calls: List[tuple] = []

    async def insert(self, record):
        raise NotImplementedError

    async def select_all(self):
        return list(self.rows.values())

    async def select_range(self, gte, lte):
        return [r for r in self.rows.values() if gte <= r.created_at <= lte]

    async def update(self, record_id, values: Dict[str, Any]):
        self.update_calls.append((record_id, values))
        if self.fail_with:
            raise GatewayError(self.fail_with)
        if record_id not in self.rows:
            return []
        self.rows[record_id] = self.rows[record_id].model_copy(update=values)
        return [self.rows[record_id]]

    async def get(self, record_id):
        return self.rows.get(record_id)

    async def ping(self):
        return True


@pytest.fixture()
def records():
    return [make_record(admission_status="Pending"), make_record(admission_status="Accepted")]


def test_begin_edit_stages_current_value(records) -> None:
    editor = StatusEditor(FakeRecordStore(records), records)
    editor.begin_edit(records[0].id, "admission_status", "Pending")
    assert editor.state == EditorState.EDITING
    assert editor.draft_value == "Pending"


async def test_cancel_never_contacts_store(records) -> None:
    store = FakeRecordStore(records)
    editor = StatusEditor(store, records)
    editor.begin_edit(records[0].id, "visa_status", "Documentation in progress")
    editor.set_draft("Approved")
    editor.cancel()
    assert editor.state == EditorState.IDLE
    assert await editor.save() is None
    assert store.update_calls == []


async def test_save_with_blank_draft_is_a_noop(records) -> None:
    store = FakeRecordStore(records)
    editor = StatusEditor(store, records)
    editor.begin_edit(records[0].id, "admission_status", "Pending")
    editor.set_draft("   ")
    assert await editor.save() is None
    assert store.update_calls == []
    assert editor.state == EditorState.EDITING


async def test_save_updates_one_field_and_merges(records) -> None:
    store = FakeRecordStore(records)
    editor = StatusEditor(store, records)
    target = records[0].id
    editor.begin_edit(target, "admission_status", "Pending")
    editor.set_draft("  Accepted ")

    updated = await editor.save()

    assert store.update_calls == [(target, {"admission_status": "Accepted"})]
    assert updated.admission_status == "Accepted"
    assert records[0].admission_status == "Accepted"
    assert records[0].visa_status == "Documentation in progress"
    assert records[1].admission_status == "Accepted"
    assert editor.state == EditorState.IDLE


async def test_failed_save_leaves_collection_untouched(records) -> None:
    store = FakeRecordStore(records, fail_with="network request failed")
    editor = StatusEditor(store, records)
    editor.begin_edit(records[0].id, "admission_status", "Pending")
    editor.set_draft("Rejected")

    with pytest.raises(GatewayError) as exc:
        await editor.save()

    assert exc.value.category == GATEWAY_NETWORK
    assert records[0].admission_status == "Pending"
    assert editor.state == EditorState.IDLE


async def test_unknown_record_is_not_found(records) -> None:
    editor = StatusEditor(FakeRecordStore(records), records)
    editor.begin_edit(uuid.uuid4(), "visa_status", "")
    editor.set_draft("Approved")
    with pytest.raises(GatewayError) as exc:
        await editor.save()
    assert exc.value.category == GATEWAY_NOT_FOUND
    assert exc.value.status_code == 404


async def test_new_edit_replaces_previous(records) -> None:
    store = FakeRecordStore(records)
    editor = StatusEditor(store, records)
    editor.begin_edit(records[0].id, "admission_status", "Pending")
    editor.begin_edit(records[1].id, "visa_status", "Documentation in progress")
    editor.set_draft("Approved")
    await editor.save()
    assert store.update_calls == [(records[1].id, {"visa_status": "Approved"})]
    assert records[0].admission_status == "Pending"


def test_only_status_fields_are_editable(records) -> None:
    editor = StatusEditor(FakeRecordStore(records), records)
    with pytest.raises(ValueError):
        editor.begin_edit(records[0].id, "email_address", "x@example.com")


def test_set_draft_requires_active_edit(records) -> None:
    editor = StatusEditor(FakeRecordStore(records), records)
    with pytest.raises(RuntimeError):
        editor.set_draft("Accepted")

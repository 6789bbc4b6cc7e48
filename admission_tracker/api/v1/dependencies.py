"""Injectable collaborators: record store, delivery channel, renderer, reporting zone."""

from datetime import tzinfo

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from admission_tracker.core.config import settings
from admission_tracker.db.session import get_db
from admission_tracker.gateway.base import RecordStoreGateway
from admission_tracker.gateway.sqlalchemy_store import SqlAlchemyRecordStore
from admission_tracker.reporting.delivery import DeliveryChannel, SimulatedDeliveryChannel
from admission_tracker.reporting.filters import resolve_timezone
from admission_tracker.reporting.renderers import DocumentRenderer, HtmlDocumentRenderer


async def get_record_store(db: AsyncSession = Depends(get_db)) -> RecordStoreGateway:
    return SqlAlchemyRecordStore(db)


def get_delivery_channel() -> DeliveryChannel:
    return SimulatedDeliveryChannel(delay_seconds=settings.delivery_delay_seconds)


def get_document_renderer() -> DocumentRenderer:
    return HtmlDocumentRenderer()


def get_report_timezone() -> tzinfo:
    return resolve_timezone(settings.report_timezone)

"""
Report delivery channels. Only a simulated channel ships; a real mail transport
implements DeliveryChannel and replaces it through the get_delivery_channel dependency.
"""

import asyncio
import logging
from abc import ABC, abstractmethod

from admission_tracker.core.exceptions import DeliveryError

from .documents import ReportSummary

logger = logging.getLogger(__name__)


class DeliveryChannel(ABC):
    @abstractmethod
    async def deliver(self, recipient: str, summary: ReportSummary) -> None:
        """Send the report summary to recipient. Raises DeliveryError on failure."""


class SimulatedDeliveryChannel(DeliveryChannel):
    """Waits a fixed delay, then succeeds for any address containing "@"."""

    def __init__(self, delay_seconds: float = 2.0) -> None:
        self.delay_seconds = delay_seconds

    async def deliver(self, recipient: str, summary: ReportSummary) -> None:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        if "@" not in recipient:
            raise DeliveryError("Invalid email format")
        logger.info(
            "Simulated delivery of report %s (%s, %d applications) to %s",
            summary.report_id,
            summary.period,
            summary.total,
            recipient,
        )

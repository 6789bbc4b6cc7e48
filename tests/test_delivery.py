from datetime import datetime, timezone

import pytest

from admission_tracker.core.exceptions import DeliveryError
from admission_tracker.reporting.delivery import SimulatedDeliveryChannel
from admission_tracker.reporting.documents import ReportSummary, synthesize_report
from admission_tracker.reporting.filters import FilterSelection
from admission_tracker.reporting.renderers import HtmlDocumentRenderer

from helpers import make_record, utc


def summary() -> ReportSummary:
    return ReportSummary(
        total=1,
        accepted=1,
        pending=0,
        rejected=0,
        under_review=0,
        acceptance_rate="100.0",
        period="October 2026",
        generated_at=datetime(2026, 10, 18, tzinfo=timezone.utc),
        report_id="AAM-1792281600000",
    )


@pytest.mark.asyncio
async def test_simulated_delivery_succeeds(caplog) -> None:
    channel = SimulatedDeliveryChannel(delay_seconds=0)
    with caplog.at_level("INFO", logger="admission_tracker.reporting.delivery"):
        await channel.deliver("director@example.com", summary())
    assert "AAM-1792281600000" in caplog.text


@pytest.mark.asyncio
async def test_simulated_delivery_rejects_address_without_at() -> None:
    with pytest.raises(DeliveryError) as exc:
        await SimulatedDeliveryChannel(delay_seconds=0).deliver("director.example.com", summary())
    assert exc.value.message == "Invalid email format"
    assert exc.value.status_code == 502


def test_html_renderer() -> None:
    generated_at = utc(2026, 10, 18, 9, 30)
    document = synthesize_report(
        [make_record(utc(2026, 10, 2))], FilterSelection.of(month="2026-10"), generated_at=generated_at
    )
    rendered = HtmlDocumentRenderer().render(document)
    assert rendered.filename == "admission-report-2026-10-18-09-30-00-Oct-2026.html"
    assert rendered.media_type == "text/html; charset=utf-8"
    assert rendered.content.decode("utf-8") == document.html

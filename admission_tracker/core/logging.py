import logging
import sys

from admission_tracker.core.config import settings


def configure_logging() -> None:
    """
    Configure logging for the whole app.
    Call this once at application startup (and from scripts before they log).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

"""
Create the admissions table if it does not exist.

Usage:
  python -m admission_tracker.scripts.init_db
"""

import asyncio
import logging

from admission_tracker.core.logging import configure_logging
from admission_tracker.db.session import create_tables, engine

logger = logging.getLogger(__name__)


async def main() -> None:
    try:
        await create_tables()
        logger.info("Schema ready")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(main())

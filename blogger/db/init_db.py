"""
Database initialization script.

Creates the blogs and comments tables and verifies connectivity. Runs on
service startup as well, but can be invoked on its own before deploying:

    python -m blogger.db.init_db
"""

from asyncio import run as asyncio_run
from logging import getLogger
from time import perf_counter

from blogger.configs import file_logger
from blogger.db.database import close_db, init_db
from blogger.errors.database import DatabaseInitializationError
from blogger.utils.helpers import time_taken

logger = file_logger(getLogger(__name__))


async def main() -> None:
    """Create tables and verify the database connection."""
    start = perf_counter()
    try:
        logger.info("Verifying database connection...")
        await init_db()
        logger.info(f"Database ready in {time_taken(start)}")
    except Exception as e:
        logger.exception("Failed to initialize database")
        raise DatabaseInitializationError from e
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio_run(main())

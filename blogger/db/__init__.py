"""Core database modules."""

from blogger.db.database import (
    async_session_maker,
    check_db_connection,
    close_db,
    engine,
    get_session,
    init_db,
    transaction,
)

__all__ = [
    "engine",
    "async_session_maker",
    "check_db_connection",
    "get_session",
    "init_db",
    "close_db",
    "transaction",
]

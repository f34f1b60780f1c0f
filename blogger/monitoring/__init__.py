"""
Monitoring module for the blog and comment services.

Usage
-----
>>> from blogger.monitoring import configure_logging
>>> configure_logging()
"""

from blogger.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    redact_pii,
    sanitize_log_message,
)

__all__ = [
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "redact_pii",
    "sanitize_log_message",
]

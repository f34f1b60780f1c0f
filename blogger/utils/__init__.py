"""Utility helper functions."""

from blogger.utils.helpers import get_summary, host, time_taken, today_str, utc_now

__all__ = [
    "get_summary",
    "host",
    "time_taken",
    "today_str",
    "utc_now",
]

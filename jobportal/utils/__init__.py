"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_timezone,
    ensure_utc_naive_datetime,
    get_app_timezone,
    now_utc,
)

__all__ = [
    "ensure_app_timezone",
    "ensure_utc_naive_datetime",
    "get_app_timezone",
    "now_utc",
]

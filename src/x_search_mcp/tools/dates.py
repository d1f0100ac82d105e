"""Calendar-day helpers for search date windows.

Dates are taken from the local calendar, not UTC, so a search started shortly after
local midnight still covers "today".
"""

from __future__ import annotations

import math
from datetime import date, timedelta


def today() -> date:
    return date.today()


def today_iso() -> str:
    return today().isoformat()


def days_ago_iso(days: int) -> str:
    return (today() - timedelta(days=days)).isoformat()


def days_back_for_hours(hours: int) -> int:
    """Whole days covering `hours`, never less than one."""
    return max(1, math.ceil(hours / 24))


__all__ = ["days_ago_iso", "days_back_for_hours", "today", "today_iso"]

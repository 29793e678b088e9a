"""Timestamp helpers."""

from datetime import date, datetime
from typing import Optional


def now() -> str:
    """Compact local timestamp for directory names, e.g. 20251114_123456."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """ISO 8601 local timestamp with microseconds."""
    return datetime.now().isoformat()


def today(moment: Optional[date] = None) -> str:
    """
    ISO date (YYYY-MM-DD) of the given moment, or of today.

    This is the generation date printed in the CV footer. It is computed once
    per run and handed to the template; the stylesheet never sees it.

    Examples:
        >>> today(date(2025, 11, 14))
        '2025-11-14'
    """
    return (moment or date.today()).strftime("%Y-%m-%d")

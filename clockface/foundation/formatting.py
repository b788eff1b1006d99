"""Human-readable time and date text for labels and the detail view."""

from __future__ import annotations

from datetime import datetime


def format_time(ts: datetime) -> str:
    """24-hour ``HH:MM``."""
    return ts.strftime("%H:%M")


def format_date(ts: datetime) -> str:
    """Short date, e.g. ``Mar 05, 2026``."""
    return ts.strftime("%b %d, %Y")

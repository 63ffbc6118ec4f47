"""Timestamp helpers for consistent time handling across the engine."""

from datetime import datetime, timezone


def ensure_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware datetime. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def whole_days_between(earlier: datetime, later: datetime) -> int:
    """Floor of the number of days from ``earlier`` to ``later``, never negative."""
    delta = ensure_utc(later) - ensure_utc(earlier)
    return max(0, delta.days)


def format_date_label(value: datetime) -> str:
    """Render a date the way the app shows it, e.g. ``March 3, 2026``."""
    return f"{value:%B} {value.day}, {value.year}"

"""Frequency service - buckets how recently a person was last seen."""

from collections.abc import Sequence
from datetime import datetime

from loop_insights.core.timeutils import whole_days_between
from loop_insights.schemas.insight import InteractionFrequency
from loop_insights.schemas.record import InteractionRecord

# (max days since last interaction, category); anything beyond is RARE
FREQUENCY_BANDS = [
    (7, InteractionFrequency.FREQUENT),
    (14, InteractionFrequency.REGULAR),
    (30, InteractionFrequency.OCCASIONAL),
]


def days_since_last(records: Sequence[InteractionRecord], now: datetime) -> int | None:
    """Whole days between the newest record and ``now``; None if there are no records."""
    if not records:
        return None
    latest = max(record.date for record in records)
    return whole_days_between(latest, now)


def frequency_for_days(days: int) -> InteractionFrequency:
    for max_days, frequency in FREQUENCY_BANDS:
        if days <= max_days:
            return frequency
    return InteractionFrequency.RARE


def classify_frequency(
    records: Sequence[InteractionRecord], now: datetime
) -> InteractionFrequency:
    """Classify interaction cadence from the most recent record. Empty means RARE."""
    days = days_since_last(records, now)
    if days is None:
        return InteractionFrequency.RARE
    return frequency_for_days(days)

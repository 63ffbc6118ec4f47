"""Trend service - compares positive moods in recent vs. older interactions."""

import math
from collections.abc import Sequence

from loop_insights.schemas.insight import EmotionalTrend
from loop_insights.schemas.record import InteractionRecord


def _is_positive(record: InteractionRecord) -> bool:
    emotion = record.emotion
    return emotion is not None and emotion.is_positive


def newest_first(records: Sequence[InteractionRecord]) -> list[InteractionRecord]:
    """Sort newest first with a total key so input order never matters."""
    return sorted(
        records,
        key=lambda r: (r.date, r.mood, r.content, r.person),
        reverse=True,
    )


def classify_trend(records: Sequence[InteractionRecord]) -> EmotionalTrend:
    """Classify the emotional trajectory. Fewer than two records is STABLE."""
    if len(records) < 2:
        return EmotionalTrend.STABLE

    ordered = newest_first(records)
    split = math.ceil(len(ordered) / 2)
    recent_positive = sum(1 for r in ordered[:split] if _is_positive(r))
    older_positive = sum(1 for r in ordered[split:] if _is_positive(r))

    if recent_positive > older_positive:
        return EmotionalTrend.IMPROVING
    if recent_positive < older_positive:
        return EmotionalTrend.DECLINING
    return EmotionalTrend.STABLE

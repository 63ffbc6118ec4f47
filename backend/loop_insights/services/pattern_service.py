"""Pattern service - turns a person's interaction history into a PatternReport.

This is the single entry point callers use. It is a pure function of its
arguments: ``now`` is always passed in, nothing is cached, and repeated calls
with the same input return equal reports.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime

from loop_insights.core.timeutils import ensure_utc, format_date_label
from loop_insights.schemas.insight import NEVER, PatternReport
from loop_insights.schemas.record import EmotionType, InteractionRecord
from loop_insights.services.frequency_service import classify_frequency
from loop_insights.services.health_service import build_metrics, score_health
from loop_insights.services.record_provider import RecordProvider
from loop_insights.services.suggestion_service import (
    rank_suggestions,
    suggested_actions,
    urgency_for,
)
from loop_insights.services.trend_service import classify_trend, newest_first

logger = logging.getLogger(__name__)

NEUTRAL = "Neutral"

_EMOTION_ORDER = {emotion: index for index, emotion in enumerate(EmotionType)}


def parse_records(raw_records: Iterable[InteractionRecord | Mapping]) -> list[InteractionRecord]:
    """Validate provider output. Raises InvalidRecordError on the first bad record."""
    return [InteractionRecord.parse(raw) for raw in raw_records]


def _mood_key(mood: str) -> str:
    return mood.strip().casefold()


def dominant_mood(records: Sequence[InteractionRecord]) -> str:
    """Most frequent mood tag, compared case-insensitively.

    Ties go to the mood whose emotion is declared first in EmotionType,
    unknown moods after known ones, then to whichever appears first newest-first.
    The newest spelling of the winning mood is returned.
    """
    if not records:
        return NEUTRAL

    ordered = newest_first(records)
    counts = Counter(_mood_key(record.mood) for record in ordered)
    first_seen: dict[str, int] = {}
    spelling: dict[str, str] = {}
    for position, record in enumerate(ordered):
        key = _mood_key(record.mood)
        if key not in first_seen:
            first_seen[key] = position
            spelling[key] = record.mood

    def rank(key: str) -> tuple[int, int, int]:
        emotion = EmotionType.from_mood(key)
        order = _EMOTION_ORDER[emotion] if emotion is not None else len(_EMOTION_ORDER)
        return (-counts[key], order, first_seen[key])

    return spelling[min(counts, key=rank)]


def analyze(
    person_name: str,
    records: Iterable[InteractionRecord | Mapping],
    now: datetime,
    connection_strength: float,
) -> PatternReport:
    """Build the full pattern report for one person."""
    now = ensure_utc(now)
    parsed = parse_records(records)

    frequency = classify_frequency(parsed, now)
    trend = classify_trend(parsed)
    dominant = dominant_mood(parsed)

    metrics = build_metrics(parsed, now, connection_strength)
    health = score_health(metrics)

    latest = newest_first(parsed)[0] if parsed else None
    suggestions = rank_suggestions(
        person_name,
        latest.content if latest else "",
        format_date_label(latest.date) if latest else "",
        urgency_for(frequency),
    )

    logger.debug(
        "Analyzed %d records for %s: frequency=%s trend=%s overall=%.3f",
        len(parsed), person_name, frequency.value, trend.value, health.overall,
    )

    return PatternReport(
        person_name=person_name,
        total_entries=len(parsed),
        dominant_emotion=dominant,
        interaction_frequency=frequency,
        emotional_trend=trend,
        last_interaction=latest.date if latest else NEVER,
        health_score=health,
        suggestions=suggestions,
        suggested_actions=suggested_actions(EmotionType.from_mood(dominant)),
    )


async def analyze_person(
    provider: RecordProvider,
    person_name: str,
    now: datetime,
    connection_strength: float,
) -> PatternReport:
    """Fetch a person's records from ``provider`` and analyze them."""
    records = await provider.fetch_records(person_name)
    return analyze(person_name, records, now, connection_strength)

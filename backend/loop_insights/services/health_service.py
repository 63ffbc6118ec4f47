"""Health service - scores relationship health from derived metrics."""

import math
from collections.abc import Sequence
from datetime import datetime

from loop_insights.schemas.insight import HealthScore, HealthTier, RelationshipMetrics
from loop_insights.schemas.record import InteractionRecord
from loop_insights.services.frequency_service import days_since_last

# Days of silence after which the communication component reaches zero
COMMUNICATION_DECAY_DAYS = 30

# Number of recorded memories at which the memory component saturates
MEMORY_SATURATION = 50

# Lower bound (inclusive) of each tier, ascending
HEALTH_TIERS = [
    (0.0, HealthTier.NEEDS_ATTENTION),
    (0.4, HealthTier.FAIR),
    (0.6, HealthTier.GOOD),
    (0.8, HealthTier.EXCELLENT),
]

TIER_RECOMMENDATIONS = {
    HealthTier.EXCELLENT: ["Maintain regular contact", "Continue sharing experiences"],
    HealthTier.GOOD: ["Increase communication frequency", "Plan quality time together"],
    HealthTier.FAIR: ["Reach out soon", "Address any relationship concerns"],
    HealthTier.NEEDS_ATTENTION: [
        "Prioritize reconnection",
        "Consider having an honest conversation",
    ],
}


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp into [low, high]. NaN counts as the worst value."""
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def build_metrics(
    records: Sequence[InteractionRecord],
    now: datetime,
    connection_strength: float,
) -> RelationshipMetrics:
    """Derive metrics from the record set. No records means a full decay window of silence."""
    days = days_since_last(records, now)
    return RelationshipMetrics(
        last_interaction_days=COMMUNICATION_DECAY_DAYS if days is None else days,
        connection_strength=connection_strength,
        total_memories=len(records),
    )


def tier_for(overall: float) -> HealthTier:
    """Get the health tier for an overall score."""
    score = clamp(overall)
    tier = HEALTH_TIERS[0][1]
    for threshold, candidate in HEALTH_TIERS:
        if score >= threshold:
            tier = candidate
    return tier


def score_health(metrics: RelationshipMetrics) -> HealthScore:
    """Combine recency, emotional strength and volume into a health score.

    Every component is clamped to [0, 1], so out-of-range metrics are
    tolerated rather than rejected.
    """
    communication = clamp(1.0 - metrics.last_interaction_days / COMMUNICATION_DECAY_DAYS)
    emotional = clamp(metrics.connection_strength)
    memory = clamp(metrics.total_memories / MEMORY_SATURATION)
    overall = (communication + emotional + memory) / 3.0

    tier = tier_for(overall)
    return HealthScore(
        overall=overall,
        communication=communication,
        emotional=emotional,
        memory=memory,
        tier=tier,
        recommendations=list(TIER_RECOMMENDATIONS[tier]),
    )

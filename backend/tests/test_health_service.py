"""Tests for the health service - component scores and tiers."""

import math

import pytest

from loop_insights.schemas.insight import HealthTier, RelationshipMetrics
from loop_insights.services.health_service import (
    COMMUNICATION_DECAY_DAYS,
    build_metrics,
    clamp,
    score_health,
    tier_for,
)


def _metrics(days=0, strength=0.5, memories=0):
    return RelationshipMetrics(
        last_interaction_days=days,
        connection_strength=strength,
        total_memories=memories,
    )


@pytest.mark.parametrize(
    "score, expected",
    [
        (0.0, HealthTier.NEEDS_ATTENTION),
        (0.3999, HealthTier.NEEDS_ATTENTION),
        (0.4, HealthTier.FAIR),
        (0.5999, HealthTier.FAIR),
        (0.6, HealthTier.GOOD),
        (0.7999, HealthTier.GOOD),
        (0.8, HealthTier.EXCELLENT),
        (1.0, HealthTier.EXCELLENT),
    ],
)
def test_tier_boundaries(score, expected):
    assert tier_for(score) == expected


def test_tier_is_monotonic():
    order = [HealthTier.NEEDS_ATTENTION, HealthTier.FAIR, HealthTier.GOOD, HealthTier.EXCELLENT]
    ranks = [order.index(tier_for(i / 100)) for i in range(101)]
    assert ranks == sorted(ranks)


def test_tier_clamps_out_of_range():
    assert tier_for(-0.5) == HealthTier.NEEDS_ATTENTION
    assert tier_for(1.5) == HealthTier.EXCELLENT


def test_overall_is_mean_of_components():
    for days in (0, 5, 29, 45):
        for strength in (0.0, 0.33, 0.9, 1.0):
            for memories in (0, 7, 50, 80):
                health = score_health(_metrics(days, strength, memories))
                mean = (health.communication + health.emotional + health.memory) / 3
                assert health.overall == pytest.approx(mean, abs=1e-9)
                assert health.tier == tier_for(health.overall)


def test_communication_decays_to_zero_at_thirty_days():
    assert score_health(_metrics(days=0)).communication == 1.0
    assert score_health(_metrics(days=15)).communication == pytest.approx(0.5)
    assert score_health(_metrics(days=30)).communication == 0.0
    assert score_health(_metrics(days=90)).communication == 0.0


def test_memory_saturates_at_fifty():
    assert score_health(_metrics(memories=25)).memory == pytest.approx(0.5)
    assert score_health(_metrics(memories=50)).memory == 1.0
    assert score_health(_metrics(memories=500)).memory == 1.0


def test_out_of_range_inputs_are_clamped():
    health = score_health(_metrics(days=-10, strength=1.7, memories=-3))
    assert health.communication == 1.0
    assert health.emotional == 1.0
    assert health.memory == 0.0


def test_example_scores_fair():
    health = score_health(_metrics(days=7, strength=0.9, memories=4))
    assert health.communication == pytest.approx(0.7667, abs=1e-3)
    assert health.memory == pytest.approx(0.08)
    assert health.emotional == pytest.approx(0.9)
    assert health.overall == pytest.approx(0.5822, abs=1e-3)
    assert health.tier == HealthTier.FAIR


def test_recommendations_per_tier():
    perfect = score_health(_metrics(days=0, strength=1.0, memories=50))
    assert perfect.tier == HealthTier.EXCELLENT
    assert perfect.recommendations == ["Maintain regular contact", "Continue sharing experiences"]

    neglected = score_health(_metrics(days=60, strength=0.1, memories=1))
    assert neglected.tier == HealthTier.NEEDS_ATTENTION
    assert len(neglected.recommendations) == 2
    assert neglected.recommendations[0] == "Prioritize reconnection"


def test_tier_metadata():
    assert HealthTier.NEEDS_ATTENTION.value == "needsAttention"
    assert HealthTier.NEEDS_ATTENTION.label == "Needs Attention"
    assert HealthTier.EXCELLENT.color == "green"


def test_nan_clamps_to_lowest():
    assert clamp(math.nan) == 0.0
    health = score_health(_metrics(days=7, strength=math.nan, memories=4))
    assert health.emotional == 0.0
    assert health.tier == HealthTier.NEEDS_ATTENTION
    assert tier_for(math.nan) == HealthTier.NEEDS_ATTENTION


def test_build_metrics_from_records(now, sample_records):
    metrics = build_metrics(sample_records, now, 0.9)
    assert metrics.last_interaction_days == 7
    assert metrics.total_memories == 4
    assert metrics.connection_strength == 0.9


def test_build_metrics_without_records_is_full_silence(now):
    metrics = build_metrics([], now, 0.9)
    assert metrics.last_interaction_days == COMMUNICATION_DECAY_DAYS
    assert metrics.total_memories == 0
    assert score_health(metrics).communication == 0.0

"""Pydantic schemas package."""

from loop_insights.schemas.record import EmotionType, InteractionRecord
from loop_insights.schemas.insight import (
    EmotionalTrend,
    HealthScore,
    HealthTier,
    InteractionFrequency,
    PatternReport,
    RelationshipMetrics,
    Suggestion,
    SuggestionType,
    Urgency,
)

__all__ = [
    "EmotionType",
    "InteractionRecord",
    "EmotionalTrend",
    "HealthScore",
    "HealthTier",
    "InteractionFrequency",
    "PatternReport",
    "RelationshipMetrics",
    "Suggestion",
    "SuggestionType",
    "Urgency",
]

"""Insight output schemas - everything the presentation layer reads."""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

NEVER = "never"  # last_interaction sentinel when there are no records


class CamelModel(BaseModel):
    """Serializes with camelCase keys; accepts snake_case or camelCase on input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InteractionFrequency(str, Enum):
    FREQUENT = "frequent"
    REGULAR = "regular"
    OCCASIONAL = "occasional"
    RARE = "rare"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return {
            InteractionFrequency.FREQUENT: "Multiple times per week",
            InteractionFrequency.REGULAR: "Weekly interactions",
            InteractionFrequency.OCCASIONAL: "Monthly interactions",
            InteractionFrequency.RARE: "Infrequent contact",
        }[self]

    @property
    def color(self) -> str:
        return {
            InteractionFrequency.FREQUENT: "green",
            InteractionFrequency.REGULAR: "blue",
            InteractionFrequency.OCCASIONAL: "yellow",
            InteractionFrequency.RARE: "red",
        }[self]


class EmotionalTrend(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def icon(self) -> str:
        return {
            EmotionalTrend.IMPROVING: "arrow.up.circle.fill",
            EmotionalTrend.STABLE: "minus.circle.fill",
            EmotionalTrend.DECLINING: "arrow.down.circle.fill",
        }[self]

    @property
    def color(self) -> str:
        return {
            EmotionalTrend.IMPROVING: "green",
            EmotionalTrend.STABLE: "blue",
            EmotionalTrend.DECLINING: "orange",
        }[self]


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SuggestionType(str, Enum):
    """Declaration order doubles as the ranking tie-break."""
    CALL = "call"
    MESSAGE = "message"
    MEMORY = "memory"


class HealthTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_ATTENTION = "needsAttention"

    @property
    def label(self) -> str:
        return {
            HealthTier.EXCELLENT: "Excellent",
            HealthTier.GOOD: "Good",
            HealthTier.FAIR: "Fair",
            HealthTier.NEEDS_ATTENTION: "Needs Attention",
        }[self]

    @property
    def color(self) -> str:
        return {
            HealthTier.EXCELLENT: "green",
            HealthTier.GOOD: "blue",
            HealthTier.FAIR: "yellow",
            HealthTier.NEEDS_ATTENTION: "red",
        }[self]


class RelationshipMetrics(CamelModel):
    """Derived per call from the record set; never stored."""
    last_interaction_days: int
    connection_strength: float
    total_memories: int


class HealthScore(CamelModel):
    overall: float
    communication: float
    emotional: float
    memory: float
    tier: HealthTier
    recommendations: list[str]


class Suggestion(CamelModel):
    type: SuggestionType
    content: str
    reasoning: str
    urgency: Urgency
    estimated_impact: float


class PatternReport(CamelModel):
    """Per-person summary; the only artifact handed to the presentation layer."""
    person_name: str
    total_entries: int
    dominant_emotion: str  # raw mood tag, or "Neutral" when there are no records
    interaction_frequency: InteractionFrequency
    emotional_trend: EmotionalTrend
    last_interaction: datetime | Literal["never"]
    health_score: HealthScore
    suggestions: list[Suggestion]
    suggested_actions: list[str]

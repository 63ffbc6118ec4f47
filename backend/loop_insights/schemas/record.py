"""Interaction record schema and the emotion vocabulary."""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ValidationError, field_validator

from loop_insights.core.exceptions import InvalidRecordError
from loop_insights.core.timeutils import ensure_utc


class EmotionType(str, Enum):
    """Closed emotion vocabulary. Declaration order is the tie-break order."""
    JOY = "joy"
    GRATITUDE = "gratitude"
    NOSTALGIA = "nostalgia"
    LOVE = "love"
    COMFORT = "comfort"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def color(self) -> str:
        return EMOTION_COLORS[self]

    @property
    def icon(self) -> str:
        return EMOTION_ICONS[self]

    @property
    def is_positive(self) -> bool:
        return self in POSITIVE_EMOTIONS

    @classmethod
    def from_mood(cls, mood: str | None) -> "EmotionType | None":
        """Map a free-text mood tag to the vocabulary, or None if unknown."""
        if not mood:
            return None
        return MOOD_ALIASES.get(mood.strip().lower())


# Presentation-only metadata, carried through unchanged
EMOTION_COLORS = {
    EmotionType.JOY: "yellow",
    EmotionType.GRATITUDE: "green",
    EmotionType.NOSTALGIA: "purple",
    EmotionType.LOVE: "pink",
    EmotionType.COMFORT: "blue",
}

EMOTION_ICONS = {
    EmotionType.JOY: "sun.max.fill",
    EmotionType.GRATITUDE: "hands.sparkles.fill",
    EmotionType.NOSTALGIA: "clock.arrow.circlepath",
    EmotionType.LOVE: "heart.fill",
    EmotionType.COMFORT: "leaf.fill",
}

POSITIVE_EMOTIONS = frozenset({EmotionType.JOY, EmotionType.GRATITUDE, EmotionType.LOVE})

# Lowercased mood tag -> emotion
MOOD_ALIASES = {
    "joy": EmotionType.JOY,
    "happy": EmotionType.JOY,
    "excited": EmotionType.JOY,
    "joyful": EmotionType.JOY,
    "cheerful": EmotionType.JOY,
    "gratitude": EmotionType.GRATITUDE,
    "grateful": EmotionType.GRATITUDE,
    "thankful": EmotionType.GRATITUDE,
    "appreciative": EmotionType.GRATITUDE,
    "nostalgia": EmotionType.NOSTALGIA,
    "nostalgic": EmotionType.NOSTALGIA,
    "wistful": EmotionType.NOSTALGIA,
    "love": EmotionType.LOVE,
    "loved": EmotionType.LOVE,
    "loving": EmotionType.LOVE,
    "affectionate": EmotionType.LOVE,
    "comfort": EmotionType.COMFORT,
    "comforted": EmotionType.COMFORT,
    "calm": EmotionType.COMFORT,
    "peaceful": EmotionType.COMFORT,
    "content": EmotionType.COMFORT,
}


class InteractionRecord(BaseModel):
    """One logged interaction with a person, as handed over by the record provider."""
    date: datetime
    mood: str  # vocabulary name or free text, e.g. "Happy"
    content: str
    person: str

    model_config = {"frozen": True}

    @field_validator("date")
    @classmethod
    def _normalize_date(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def emotion(self) -> EmotionType | None:
        return EmotionType.from_mood(self.mood)

    @classmethod
    def parse(cls, raw: "InteractionRecord | Mapping") -> "InteractionRecord":
        """Coerce provider output into a record, naming the bad field on failure."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            raise InvalidRecordError(
                "record", f"Expected a mapping or InteractionRecord, got {type(raw).__name__}"
            )
        try:
            return cls.model_validate(dict(raw))
        except ValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else "record"
            raise InvalidRecordError(
                field, f"Invalid interaction record field '{field}': {error['msg']}"
            ) from exc

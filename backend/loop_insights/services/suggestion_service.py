"""Suggestion service - builds and ranks reconnection actions."""

from loop_insights.schemas.insight import (
    InteractionFrequency,
    Suggestion,
    SuggestionType,
    Urgency,
)
from loop_insights.schemas.record import EmotionType

BASE_IMPACT = {
    SuggestionType.CALL: 0.8,
    SuggestionType.MESSAGE: 0.7,
    SuggestionType.MEMORY: 0.9,
}

FREQUENCY_URGENCY = {
    InteractionFrequency.FREQUENT: Urgency.LOW,
    InteractionFrequency.REGULAR: Urgency.LOW,
    InteractionFrequency.OCCASIONAL: Urgency.MEDIUM,
    InteractionFrequency.RARE: Urgency.HIGH,
}

DEFAULT_MEMORY_TEXT = "something you shared recently"
DEFAULT_DATE_LABEL = "a favorite moment together"

# Per-emotion follow-ups shown next to the dominant emotion
EMOTION_ACTIONS = {
    EmotionType.JOY: [
        "Plan a fun activity together",
        "Share a funny memory",
        "Suggest a new adventure",
    ],
    EmotionType.GRATITUDE: [
        "Express appreciation",
        "Write a heartfelt message",
        "Acknowledge their support",
    ],
    EmotionType.NOSTALGIA: [
        "Share old photos",
        "Reminisce about good times",
        "Visit a meaningful place",
    ],
    EmotionType.LOVE: [
        "Tell them you love them",
        "Spend quality time together",
        "Create new memories",
    ],
    EmotionType.COMFORT: [
        "Have a deep conversation",
        "Offer emotional support",
        "Simply be present",
    ],
}

RECONNECTION_PROMPTS = {
    EmotionType.JOY: "Share a happy memory or plan something fun together",
    EmotionType.GRATITUDE: "Express appreciation for their impact on your life",
    EmotionType.NOSTALGIA: "Reminisce about a special shared experience",
    EmotionType.LOVE: "Tell them how much they mean to you",
    EmotionType.COMFORT: "Reach out for a meaningful conversation",
}


def urgency_for(frequency: InteractionFrequency) -> Urgency:
    return FREQUENCY_URGENCY[frequency]


def suggested_actions(emotion: EmotionType | None) -> list[str]:
    """Actions for an emotion; unknown moods get the comfort actions."""
    return list(EMOTION_ACTIONS[emotion or EmotionType.COMFORT])


def reconnection_prompt(emotion: EmotionType) -> str:
    return RECONNECTION_PROMPTS[emotion]


def rank_suggestions(
    person_name: str,
    last_memory_text: str,
    memory_date_label: str,
    urgency: Urgency,
) -> list[Suggestion]:
    """Return one suggestion per type, highest estimated impact first.

    ``sorted`` is stable and candidates are built in SuggestionType order, so
    equal impacts keep call, message, memory order.
    """
    memory_text = last_memory_text.strip() or DEFAULT_MEMORY_TEXT
    date_label = memory_date_label.strip() or DEFAULT_DATE_LABEL

    candidates = [
        Suggestion(
            type=SuggestionType.CALL,
            content=f"Give {person_name} a call to catch up",
            reasoning="It's been a while since your last conversation",
            urgency=urgency,
            estimated_impact=BASE_IMPACT[SuggestionType.CALL],
        ),
        Suggestion(
            type=SuggestionType.MESSAGE,
            content=f"Send a thoughtful message about {memory_text}",
            reasoning="Referencing shared memories strengthens connections",
            urgency=urgency,
            estimated_impact=BASE_IMPACT[SuggestionType.MESSAGE],
        ),
        Suggestion(
            type=SuggestionType.MEMORY,
            content=f"Share a photo from {date_label}",
            reasoning="Visual memories create emotional resonance",
            urgency=urgency,
            estimated_impact=BASE_IMPACT[SuggestionType.MEMORY],
        ),
    ]
    return sorted(candidates, key=lambda s: s.estimated_impact, reverse=True)

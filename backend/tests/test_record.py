"""Tests for the interaction record schema and emotion vocabulary."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from loop_insights.core.exceptions import InvalidRecordError
from loop_insights.schemas.record import EmotionType, InteractionRecord


def test_emotion_declaration_order():
    assert [e.value for e in EmotionType] == ["joy", "gratitude", "nostalgia", "love", "comfort"]


def test_emotion_metadata_round_trips():
    """Every emotion has display metadata, and the value survives a round trip."""
    for emotion in EmotionType:
        assert emotion.color
        assert emotion.icon
        assert EmotionType(emotion.value) is emotion
    assert EmotionType.LOVE.icon == "heart.fill"
    assert EmotionType.JOY.label == "Joy"


def test_from_mood_free_text():
    assert EmotionType.from_mood("Happy") is EmotionType.JOY
    assert EmotionType.from_mood("Excited") is EmotionType.JOY
    assert EmotionType.from_mood(" grateful ") is EmotionType.GRATITUDE
    assert EmotionType.from_mood("Nostalgic") is EmotionType.NOSTALGIA
    assert EmotionType.from_mood("love") is EmotionType.LOVE


def test_from_mood_unknown_is_none():
    assert EmotionType.from_mood("Confused") is None
    assert EmotionType.from_mood("") is None
    assert EmotionType.from_mood(None) is None


def test_positive_emotions():
    assert EmotionType.JOY.is_positive
    assert EmotionType.GRATITUDE.is_positive
    assert EmotionType.LOVE.is_positive
    assert not EmotionType.NOSTALGIA.is_positive
    assert not EmotionType.COMFORT.is_positive


def test_naive_date_is_treated_as_utc():
    record = InteractionRecord(date=datetime(2026, 1, 1), mood="Happy", content="x", person="Mom")
    assert record.date == datetime(2026, 1, 1, tzinfo=timezone.utc)


def test_record_is_immutable():
    record = InteractionRecord(date=datetime(2026, 1, 1), mood="Happy", content="x", person="Mom")
    with pytest.raises(ValidationError):
        record.mood = "Sad"


def test_parse_mapping():
    record = InteractionRecord.parse(
        {"date": "2026-01-01T10:00:00Z", "mood": "Calm", "content": "Walk", "person": "Dad"}
    )
    assert record.emotion is EmotionType.COMFORT
    assert record.person == "Dad"


def test_parse_passes_records_through():
    record = InteractionRecord(date=datetime(2026, 1, 1), mood="Happy", content="x", person="Mom")
    assert InteractionRecord.parse(record) is record


def test_parse_missing_date_names_field():
    with pytest.raises(InvalidRecordError) as exc_info:
        InteractionRecord.parse({"mood": "Happy", "content": "x", "person": "Mom"})
    assert exc_info.value.field == "date"
    assert "date" in str(exc_info.value)


def test_parse_bad_date_names_field():
    with pytest.raises(InvalidRecordError) as exc_info:
        InteractionRecord.parse(
            {"date": "not a date", "mood": "Happy", "content": "x", "person": "Mom"}
        )
    assert exc_info.value.field == "date"


def test_parse_missing_person_names_field():
    with pytest.raises(InvalidRecordError) as exc_info:
        InteractionRecord.parse({"date": "2026-01-01T00:00:00Z", "mood": "Happy", "content": "x"})
    assert exc_info.value.field == "person"


def test_parse_rejects_non_mapping():
    with pytest.raises(InvalidRecordError) as exc_info:
        InteractionRecord.parse(["2026-01-01", "Happy"])
    assert exc_info.value.field == "record"

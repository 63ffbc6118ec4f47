"""Request/response schemas for the insights API."""

from datetime import datetime

from pydantic import Field, FiniteFloat

from loop_insights.schemas.insight import CamelModel


class AnalyzeRequest(CamelModel):
    person_name: str = Field(min_length=1, max_length=200)
    # Raw provider records; validated by the engine so errors name the bad field
    records: list[dict] = Field(default_factory=list)
    now: datetime | None = None  # defaults to request time
    connection_strength: FiniteFloat | None = None


class EmotionInfo(CamelModel):
    emotion: str
    label: str
    color: str
    icon: str
    suggested_actions: list[str]
    reconnection_prompt: str


class CategoryInfo(CamelModel):
    value: str
    label: str
    color: str
    description: str | None = None
    icon: str | None = None


class CategoriesResponse(CamelModel):
    frequencies: list[CategoryInfo]
    trends: list[CategoryInfo]
    tiers: list[CategoryInfo]

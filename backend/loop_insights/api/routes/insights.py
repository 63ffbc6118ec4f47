"""Insight endpoints - analyze a person's interaction history."""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from loop_insights.config import settings
from loop_insights.schemas.analysis import (
    AnalyzeRequest,
    CategoriesResponse,
    CategoryInfo,
    EmotionInfo,
)
from loop_insights.schemas.insight import (
    EmotionalTrend,
    HealthTier,
    InteractionFrequency,
    PatternReport,
)
from loop_insights.schemas.record import EmotionType
from loop_insights.services.pattern_service import analyze
from loop_insights.services.suggestion_service import reconnection_prompt, suggested_actions

router = APIRouter()


@router.post("/analyze", response_model=PatternReport)
async def analyze_records(data: AnalyzeRequest):
    """Compute the pattern report for the submitted records."""
    if len(data.records) > settings.MAX_RECORDS_PER_REQUEST:
        raise HTTPException(
            status_code=413,
            detail=f"Too many records (max {settings.MAX_RECORDS_PER_REQUEST})",
        )

    now = data.now or datetime.now(timezone.utc)
    strength = data.connection_strength
    if strength is None:
        strength = settings.DEFAULT_CONNECTION_STRENGTH

    return analyze(data.person_name, data.records, now, strength)


@router.get("/emotions", response_model=list[EmotionInfo])
async def list_emotions():
    """List the emotion vocabulary with its display metadata."""
    return [
        EmotionInfo(
            emotion=emotion.value,
            label=emotion.label,
            color=emotion.color,
            icon=emotion.icon,
            suggested_actions=suggested_actions(emotion),
            reconnection_prompt=reconnection_prompt(emotion),
        )
        for emotion in EmotionType
    ]


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories():
    """List frequency, trend and health-tier categories with their display metadata."""
    return CategoriesResponse(
        frequencies=[
            CategoryInfo(
                value=f.value, label=f.label, color=f.color, description=f.description
            )
            for f in InteractionFrequency
        ],
        trends=[
            CategoryInfo(value=t.value, label=t.label, color=t.color, icon=t.icon)
            for t in EmotionalTrend
        ],
        tiers=[
            CategoryInfo(value=tier.value, label=tier.label, color=tier.color)
            for tier in HealthTier
        ],
    )

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from careerforge.core.config import settings
from careerforge.core.utils import utc_now
from careerforge.models import IndustryInsight
from careerforge.models.schemas import IndustryInsightData
from careerforge.services import ai_client
from careerforge.services.ai_text import parse_json_response
from careerforge.services.fallbacks import default_insights
from careerforge.services.prompts import insights_prompt

log = logging.getLogger("careerforge.insights")


def fetch_ai_insights(industry: str) -> Optional[Dict[str, Any]]:
    """AI market snapshot as a snake_case dict, or None when AI is off or fails."""
    if not ai_client.can_generate():
        return None

    try:
        text = ai_client.generate_text(insights_prompt(industry), temperature=0.2)
        data = IndustryInsightData.model_validate(parse_json_response(text))
    except Exception as e:
        log.warning("Insights generation failed for %r: %s", industry, e)
        return None

    return data.model_dump()


def generate_ai_insights(industry: str) -> Dict[str, Any]:
    """
    Market snapshot for ``industry``. Falls back to the static default table
    when AI is not configured or returns anything unusable.
    """
    return fetch_ai_insights(industry) or default_insights(industry)


def find_insight(db: Session, industry: str) -> Optional[IndustryInsight]:
    return db.query(IndustryInsight).filter(IndustryInsight.industry == industry).first()


def build_insight(industry: str, data: Dict[str, Any], now: Optional[datetime] = None) -> IndustryInsight:
    now = now or utc_now()
    return IndustryInsight(
        industry=industry,
        last_updated=now,
        next_update=now + timedelta(days=settings.insight_ttl_days),
        **data,
    )


def ensure_insight(db: Session, industry: str) -> IndustryInsight:
    """
    Existing insight row for ``industry``, or a new one flushed into the
    current transaction. Call before making other changes in the session:
    losing the insert race rolls the session back.
    """
    insight = find_insight(db, industry)
    if insight is not None:
        return insight

    insight = build_insight(industry, generate_ai_insights(industry))
    db.add(insight)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        existing = find_insight(db, industry)
        if existing is None:
            raise
        log.info("Insight for %r was created concurrently; using it", industry)
        return existing
    return insight


def get_industry_insights(db: Session, user) -> IndustryInsight:
    """Cached insight for the user's industry; generated and stored on first use."""
    if not user.industry:
        raise HTTPException(status_code=400, detail="Set your industry before requesting insights")

    industry = user.industry
    try:
        insight = ensure_insight(db, industry)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        log.exception("Error saving industry insight for %r", industry)
        raise HTTPException(status_code=500, detail="Failed to save industry insights")
    db.refresh(insight)
    return insight


def refresh_stale_insights(db: Session, now: Optional[datetime] = None) -> int:
    """
    Regenerate every insight whose ``next_update`` has passed. Rows the AI
    cannot refresh keep their data and stay stale for the next run.
    """
    now = now or utc_now()
    stale = db.query(IndustryInsight).filter(IndustryInsight.next_update <= now).all()

    refreshed = 0
    for insight in stale:
        data = fetch_ai_insights(insight.industry)
        if data is None:
            log.warning("Keeping stale insight for %r", insight.industry)
            continue
        for key, value in data.items():
            setattr(insight, key, value)
        insight.last_updated = now
        insight.next_update = now + timedelta(days=settings.insight_ttl_days)
        refreshed += 1

    if refreshed:
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            log.exception("Error refreshing %d industry insights", refreshed)
            raise
    log.info("Refreshed %d of %d stale industry insights", refreshed, len(stale))
    return refreshed

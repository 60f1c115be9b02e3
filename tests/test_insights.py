import json
from datetime import datetime, timedelta

from careerforge.models import IndustryInsight
from careerforge.services.fallbacks import default_insights
from careerforge.services.insights import (
    build_insight,
    generate_ai_insights,
    get_industry_insights,
    refresh_stale_insights,
)
from tests.conftest import auth_headers_for, make_user

AI_INSIGHTS = {
    "salaryRanges": [
        {"role": "Data Analyst", "min": 60000, "max": 90000, "median": 75000, "location": "US"},
        {"role": "Data Engineer", "min": 90000, "max": 140000, "median": 115000, "location": "US"},
    ],
    "growthRate": 12.5,
    "demandLevel": "HIGH",
    "topSkills": ["SQL", "Python"],
    "marketOutlook": "positive",
    "keyTrends": ["LLMs"],
    "recommendedSkills": ["dbt"],
}


def test_no_credential_returns_static_default():
    data = generate_ai_insights("Tech")
    assert data == default_insights("Tech")
    assert len(data["salary_ranges"]) == 5


def test_fenced_ai_json_is_normalized(fake_ai):
    fake_ai.replies.append("```json\n" + json.dumps(AI_INSIGHTS) + "\n```")

    data = generate_ai_insights("Data")

    assert "Data industry" in fake_ai.prompts[0]
    assert data["growth_rate"] == 12.5
    assert data["demand_level"] == "High"
    assert data["market_outlook"] == "Positive"
    assert data["salary_ranges"][1]["role"] == "Data Engineer"


def test_malformed_ai_json_falls_back(fake_ai):
    fake_ai.replies.append("Here are your insights: {not json")
    assert generate_ai_insights("Tech") == default_insights("Tech")


def test_wrong_shape_falls_back(fake_ai):
    fake_ai.replies.append(json.dumps({"growthRate": "fast"}))
    assert generate_ai_insights("Tech") == default_insights("Tech")


def test_ai_error_falls_back(fake_ai):
    fake_ai.replies.append(RuntimeError("connection reset"))
    assert generate_ai_insights("Tech") == default_insights("Tech")


def test_insight_created_once_per_industry(db, user, fake_ai):
    fake_ai.replies.append(json.dumps(AI_INSIGHTS))

    first = get_industry_insights(db, user)
    second = get_industry_insights(db, user)

    assert first.id == second.id
    assert len(fake_ai.prompts) == 1
    assert db.query(IndustryInsight).count() == 1
    delta = first.next_update - first.last_updated
    assert delta == timedelta(days=7)


def test_insights_route_returns_default_without_ai(client, auth_headers):
    resp = client.get("/api/insights", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["industry"] == "Tech"
    assert len(body["salary_ranges"]) == 5
    assert body["demand_level"] == "High"


def test_insights_route_requires_industry(client, db):
    make_user(db, external_id="new_user", industry=None)
    resp = client.get("/api/insights", headers=auth_headers_for("new_user"))
    assert resp.status_code == 400


def test_refresh_only_touches_stale_rows(db, fake_ai):
    now = datetime(2026, 1, 10)
    stale = build_insight("Tech", default_insights(), now=now - timedelta(days=8))
    fresh = build_insight("Finance", default_insights(), now=now - timedelta(days=1))
    db.add_all([stale, fresh])
    db.commit()
    fake_ai.replies.append(json.dumps(AI_INSIGHTS))

    assert refresh_stale_insights(db, now=now) == 1

    db.refresh(stale)
    db.refresh(fresh)
    assert stale.growth_rate == 12.5
    assert stale.next_update == now + timedelta(days=7)
    assert fresh.growth_rate == 8
    assert len(fake_ai.prompts) == 1
    assert "Tech industry" in fake_ai.prompts[0]


def test_failed_refresh_keeps_existing_data(db, fake_ai):
    now = datetime(2026, 1, 10)
    stale = build_insight("Data", {**default_insights("Data"), "growth_rate": 12.5}, now=now - timedelta(days=8))
    db.add(stale)
    db.commit()
    next_update = stale.next_update
    fake_ai.replies.append(RuntimeError("rate limited"))

    assert refresh_stale_insights(db, now=now) == 0

    db.refresh(stale)
    assert stale.growth_rate == 12.5
    assert stale.next_update == next_update
    assert len(fake_ai.prompts) == 1

"""
Quiz generation, scoring and assessment history.

A quiz is a list of plain dicts ``{question, options, correct_answer,
explanation}``. Answers are compared to ``correct_answer`` by exact string
equality; nothing is normalized.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from careerforge.models import Assessment, User
from careerforge.models.schemas import QuizPayload
from careerforge.services import ai_client
from careerforge.services.ai_text import parse_json_response
from careerforge.services.fallbacks import AI_ERROR_TIP, NO_AI_TIP, fallback_quiz
from careerforge.services.prompts import improvement_prompt, quiz_prompt

log = logging.getLogger("careerforge.interview")

CATEGORY = "Technical"


# -----------------------------
# Quiz generation
# -----------------------------
def generate_quiz(user: User) -> List[Dict[str, Any]]:
    if not ai_client.can_generate():
        return fallback_quiz(user.industry)

    try:
        text = ai_client.generate_text(quiz_prompt(user), temperature=0.7)
        quiz = QuizPayload.model_validate(parse_json_response(text))
    except Exception as e:
        log.error("Error generating quiz: %s", e)
        return fallback_quiz(user.industry)

    return [q.model_dump() for q in quiz.questions]


# -----------------------------
# Scoring
# -----------------------------
def _get(q: Any, key: str, alias: Optional[str] = None) -> Any:
    if isinstance(q, dict):
        if key in q:
            return q[key]
        return q.get(alias) if alias else None
    return getattr(q, key, None)


def score_answers(questions: Sequence[Any], answers: Sequence[Optional[str]]) -> List[Dict[str, Any]]:
    """Per-question results; a missing answer counts as wrong."""
    results = []
    for index, q in enumerate(questions):
        correct = _get(q, "correct_answer", "correctAnswer")
        user_answer = answers[index] if index < len(answers) else None
        results.append({
            "question": _get(q, "question"),
            "answer": correct,
            "user_answer": user_answer,
            "is_correct": user_answer is not None and correct == user_answer,
            "explanation": _get(q, "explanation") or "",
        })
    return results


def percent_correct(results: Sequence[Dict[str, Any]]) -> float:
    if not results:
        return 0.0
    correct = sum(1 for r in results if r["is_correct"])
    return round(correct / len(results) * 100, 2)


def format_wrong_answers(wrong: Sequence[Dict[str, Any]]) -> str:
    return "\n\n".join(
        f'Question: "{q["question"]}"\nCorrect Answer: "{q["answer"]}"\nUser Answer: "{q["user_answer"]}"'
        for q in wrong
    )


def improvement_tip(user: User, results: Sequence[Dict[str, Any]]) -> Optional[str]:
    """None when every answer is right; otherwise a short study tip."""
    wrong = [r for r in results if not r["is_correct"]]
    if not wrong:
        return None

    if not ai_client.can_generate():
        return NO_AI_TIP

    try:
        tip = ai_client.generate_text(improvement_prompt(user.industry, format_wrong_answers(wrong)))
    except Exception as e:
        log.error("Error generating improvement tip: %s", e)
        return AI_ERROR_TIP

    return (tip or "").strip() or AI_ERROR_TIP


def save_quiz_result(
    db: Session,
    user: User,
    questions: Sequence[Any],
    answers: Sequence[Optional[str]],
    score: Optional[float] = None,
) -> Assessment:
    results = score_answers(questions, answers)
    if score is None:
        score = percent_correct(results)

    assessment = Assessment(
        user_id=user.id,
        quiz_score=score,
        questions=results,
        category=CATEGORY,
        improvement_tip=improvement_tip(user, results),
    )
    db.add(assessment)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        log.exception("Error saving quiz result for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to save quiz result")
    db.refresh(assessment)
    return assessment


# -----------------------------
# History
# -----------------------------
def list_assessments(db: Session, user: User) -> List[Assessment]:
    try:
        return (
            db.query(Assessment)
            .filter(Assessment.user_id == user.id)
            .order_by(Assessment.created_at.asc(), Assessment.id.asc())
            .all()
        )
    except SQLAlchemyError:
        log.exception("Error fetching assessments for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to fetch assessments")


def summarize_assessments(assessments: Sequence[Assessment]) -> Dict[str, Any]:
    """Average/latest score, questions practiced and the daily score trend."""
    if not assessments:
        return {
            "assessment_count": 0,
            "average_score": 0.0,
            "latest_score": None,
            "total_questions": 0,
            "trend": [],
        }

    df = pd.DataFrame([
        {
            "created_at": a.created_at,
            "score": float(a.quiz_score),
            "questions": len(a.questions or []),
        }
        for a in assessments
    ]).sort_values("created_at", kind="stable")

    df["date"] = pd.to_datetime(df["created_at"]).dt.strftime("%Y-%m-%d")
    trend = df.groupby("date", sort=True)["score"].mean().round(2)

    return {
        "assessment_count": int(len(df)),
        "average_score": round(float(df["score"].mean()), 2),
        "latest_score": float(df["score"].iloc[-1]),
        "total_questions": int(df["questions"].sum()),
        "trend": [{"date": d, "score": float(s)} for d, s in trend.items()],
    }

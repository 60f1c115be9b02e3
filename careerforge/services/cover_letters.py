import logging
from typing import List, Optional

from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from careerforge.models import CoverLetter, User
from careerforge.models.schemas import CoverLetterRequest
from careerforge.services import ai_client
from careerforge.services.fallbacks import fallback_cover_letter
from careerforge.services.prompts import cover_letter_prompt

log = logging.getLogger("careerforge.cover_letters")


def _letter_content(user: User, data: CoverLetterRequest) -> str:
    if not ai_client.can_generate():
        return fallback_cover_letter(user, data)

    try:
        content = ai_client.generate_text(cover_letter_prompt(user, data), temperature=0.6)
    except Exception as e:
        log.warning("Cover letter generation failed, using template: %s", e)
        return fallback_cover_letter(user, data)

    return (content or "").strip() or fallback_cover_letter(user, data)


def generate_cover_letter(db: Session, user: User, data: CoverLetterRequest) -> CoverLetter:
    letter = CoverLetter(
        content=_letter_content(user, data),
        job_description=data.job_description,
        company_name=data.company_name,
        job_title=data.job_title,
        status="completed",
        user_id=user.id,
    )
    db.add(letter)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        log.exception("Error saving cover letter for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to save cover letter")
    db.refresh(letter)
    return letter


def list_cover_letters(db: Session, user: User) -> List[CoverLetter]:
    return (
        db.query(CoverLetter)
        .filter(CoverLetter.user_id == user.id)
        .order_by(CoverLetter.created_at.desc(), CoverLetter.id.desc())
        .all()
    )


def get_cover_letter(db: Session, user: User, letter_id: int) -> Optional[CoverLetter]:
    return (
        db.query(CoverLetter)
        .filter(CoverLetter.id == letter_id, CoverLetter.user_id == user.id)
        .first()
    )


def delete_cover_letter(db: Session, user: User, letter_id: int) -> None:
    letter = get_cover_letter(db, user, letter_id)
    if not letter:
        raise HTTPException(status_code=404, detail="Cover letter not found")

    db.delete(letter)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        log.exception("Error deleting cover letter %s", letter_id)
        raise HTTPException(status_code=500, detail="Failed to delete cover letter")

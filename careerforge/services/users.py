import logging
from typing import Any, Dict

from fastapi import Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from careerforge.core.security import get_current_identity
from careerforge.db.session import get_db
from careerforge.models import User
from careerforge.models.schemas import ProfileUpdate
from careerforge.services import insights

logger = logging.getLogger("careerforge.users")


def get_user_by_external_id(db: Session, external_id: str):
    return db.query(User).filter(User.external_id == external_id).first()


def get_current_user(
    identity: Dict[str, Any] = Depends(get_current_identity),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the verified session to its user row (404 if never synced)."""
    user = get_user_by_external_id(db, identity["sub"])
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


def sync_user(db: Session, claims: Dict[str, Any]) -> User:
    """
    Load the user for these token claims, creating the row on first sign-in.
    """
    external_id = claims["sub"]
    user = get_user_by_external_id(db, external_id)
    if user:
        return user

    user = User(
        external_id=external_id,
        email=claims.get("email"),
        name=claims.get("name") or " ".join(
            p for p in (claims.get("given_name"), claims.get("family_name")) if p
        ) or None,
        image_url=claims.get("picture") or claims.get("image_url"),
        skills=[],
    )
    db.add(user)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create user %s", external_id)
        raise HTTPException(status_code=500, detail="Failed to create user")
    db.refresh(user)
    logger.info("Created user %s", external_id)
    return user


def update_profile(db: Session, user: User, data: ProfileUpdate) -> User:
    """
    Onboarding: store industry/experience/skills/bio. The industry's insight
    row is created in the same transaction when missing.
    """
    try:
        # Before touching the user: a lost insert race rolls the session back
        insights.ensure_insight(db, data.industry)

        user.industry = data.industry
        user.experience = data.experience
        user.skills = list(data.skills)
        user.bio = data.bio
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to update profile for user %s", user.id)
        raise HTTPException(status_code=500, detail="Failed to update profile")

    db.refresh(user)
    return user


def get_onboarding_status(user: User) -> Dict[str, bool]:
    return {"is_onboarded": bool(user.industry)}

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from careerforge.core.security import get_current_identity
from careerforge.db.session import get_db
from careerforge.models import User
from careerforge.models.schemas import OnboardingStatus, ProfileUpdate, UserOut
from careerforge.services import users as users_service
from careerforge.services.users import get_current_user

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("/sync", response_model=UserOut)
def sync(identity: Dict[str, Any] = Depends(get_current_identity), db: Session = Depends(get_db)):
    """Create the local user row on first sign-in; return it afterwards."""
    return users_service.sync_user(db, identity)


@router.get("/me", response_model=UserOut)
def me(user: User = Depends(get_current_user)):
    return user


@router.put("/me/profile", response_model=UserOut)
def update_profile(req: ProfileUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return users_service.update_profile(db, user, req)


@router.get("/me/onboarding-status", response_model=OnboardingStatus)
def onboarding_status(user: User = Depends(get_current_user)):
    return users_service.get_onboarding_status(user)

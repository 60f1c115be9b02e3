from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from careerforge.db.session import get_db
from careerforge.models import User
from careerforge.models.schemas import CoverLetterOut, CoverLetterRequest
from careerforge.services import cover_letters as service
from careerforge.services.users import get_current_user

router = APIRouter(prefix="/api/cover-letters", tags=["Cover letters"])


@router.post("", response_model=CoverLetterOut, status_code=201)
def create_cover_letter(req: CoverLetterRequest, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Draft a cover letter for a job. Uses OpenAI when configured,
    otherwise a template filled from the user's profile.
    """
    return service.generate_cover_letter(db, user, req)


@router.get("", response_model=List[CoverLetterOut])
def list_cover_letters(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return service.list_cover_letters(db, user)


@router.get("/{letter_id}", response_model=CoverLetterOut)
def get_cover_letter(letter_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    letter = service.get_cover_letter(db, user, letter_id)
    if not letter:
        raise HTTPException(status_code=404, detail="Cover letter not found")
    return letter


@router.delete("/{letter_id}")
def delete_cover_letter(letter_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    service.delete_cover_letter(db, user, letter_id)
    return {"id": letter_id, "status": "deleted"}

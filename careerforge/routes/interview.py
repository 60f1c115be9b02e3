from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from careerforge.db.session import get_db
from careerforge.models import User
from careerforge.models.schemas import AssessmentOut, AssessmentSummary, QuizQuestion, QuizResultRequest
from careerforge.services import interview as service
from careerforge.services.users import get_current_user

router = APIRouter(prefix="/api/interview", tags=["Interview prep"])


@router.post("/quiz", response_model=List[QuizQuestion], response_model_by_alias=False)
def generate_quiz(user: User = Depends(get_current_user)):
    return service.generate_quiz(user)


@router.post("/assessments", response_model=AssessmentOut, status_code=201)
def save_quiz_result(req: QuizResultRequest, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    questions = [q.model_dump() for q in req.questions]
    return service.save_quiz_result(db, user, questions, req.answers, req.score)


@router.get("/assessments", response_model=List[AssessmentOut])
def list_assessments(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return service.list_assessments(db, user)


@router.get("/assessments/summary", response_model=AssessmentSummary)
def assessment_summary(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return service.summarize_assessments(service.list_assessments(db, user))

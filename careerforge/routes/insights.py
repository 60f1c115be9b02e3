from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from careerforge.db.session import get_db
from careerforge.models import User
from careerforge.models.schemas import IndustryInsightOut
from careerforge.services import insights as service
from careerforge.services.users import get_current_user

router = APIRouter(prefix="/api/insights", tags=["Industry insights"])


@router.get("", response_model=IndustryInsightOut)
def get_industry_insights(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return service.get_industry_insights(db, user)

from sqlalchemy import Column, ForeignKey, Integer, String, Float, Text, DateTime, JSON
from sqlalchemy.orm import relationship

from careerforge.core.utils import utc_now
from careerforge.db.session import Base

class Assessment(Base):
    __tablename__ = "assessments"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    quiz_score = Column(Float, nullable=False)
    # [{question, answer, user_answer, is_correct, explanation}]
    questions = Column(JSON, nullable=False, default=list)
    category = Column(String(50), nullable=False, default="Technical")
    improvement_tip = Column(Text)

    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    user = relationship("User", back_populates="assessments")

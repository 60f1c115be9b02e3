from sqlalchemy import Column, ForeignKey, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship

from careerforge.core.utils import utc_now
from careerforge.db.session import Base

class CoverLetter(Base):
    __tablename__ = "cover_letters"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    content = Column(Text, nullable=False)
    job_description = Column(Text)
    company_name = Column(String(200), nullable=False)
    job_title = Column(String(200), nullable=False)
    status = Column(String(20), nullable=False, default="draft")  # "draft" | "completed"

    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    user = relationship("User", back_populates="cover_letters")

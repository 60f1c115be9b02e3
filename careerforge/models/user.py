from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import relationship

from careerforge.core.utils import utc_now
from careerforge.db.session import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    # Subject claim from the identity provider
    external_id = Column(String(200), unique=True, nullable=False, index=True)
    email = Column(String(200))
    name = Column(String(150))
    image_url = Column(String(500))

    industry = Column(String(150), index=True)
    experience = Column(Integer)
    skills = Column(JSON, default=list)
    bio = Column(Text)

    created_at = Column(DateTime, default=utc_now, nullable=False)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now, nullable=False)

    cover_letters = relationship("CoverLetter", back_populates="user", cascade="all, delete-orphan")
    assessments = relationship("Assessment", back_populates="user", cascade="all, delete-orphan")

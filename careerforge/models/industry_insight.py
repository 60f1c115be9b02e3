from sqlalchemy import Column, Integer, String, Float, DateTime, JSON

from careerforge.core.utils import utc_now
from careerforge.db.session import Base

class IndustryInsight(Base):
    """Cached market snapshot for one industry; stale after ``next_update``."""

    __tablename__ = "industry_insights"

    id = Column(Integer, primary_key=True)
    industry = Column(String(150), unique=True, nullable=False)

    salary_ranges = Column(JSON, nullable=False, default=list)  # [{role, min, max, median, location}]
    growth_rate = Column(Float, nullable=False)
    demand_level = Column(String(20), nullable=False)           # "High" | "Medium" | "Low"
    top_skills = Column(JSON, nullable=False, default=list)
    market_outlook = Column(String(20), nullable=False)         # "Positive" | "Neutral" | "Negative"
    key_trends = Column(JSON, nullable=False, default=list)
    recommended_skills = Column(JSON, nullable=False, default=list)

    last_updated = Column(DateTime, default=utc_now, nullable=False)
    next_update = Column(DateTime, nullable=False, index=True)

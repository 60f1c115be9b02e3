from careerforge.models.user import User
from careerforge.models.cover_letter import CoverLetter
from careerforge.models.industry_insight import IndustryInsight
from careerforge.models.assessment import Assessment

__all__ = ["User", "CoverLetter", "IndustryInsight", "Assessment"]

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ================= USERS =================

class ProfileUpdate(BaseModel):
    industry: str = Field(min_length=1, max_length=150)
    experience: Optional[int] = Field(default=None, ge=0, le=80)
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = Field(default=None, max_length=5000)

    @field_validator("industry")
    @classmethod
    def _strip_industry(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("industry must not be blank")
        return v

    @field_validator("skills")
    @classmethod
    def _strip_skills(cls, v: List[str]) -> List[str]:
        return [s.strip() for s in v if s and s.strip()]


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    external_id: str
    email: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    industry: Optional[str] = None
    experience: Optional[int] = None
    skills: List[str] = Field(default_factory=list)
    bio: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def _none_skills(cls, v):
        return v or []


class OnboardingStatus(BaseModel):
    is_onboarded: bool


# ================= COVER LETTERS =================

class CoverLetterRequest(BaseModel):
    job_title: str = Field(min_length=1, max_length=200)
    company_name: str = Field(min_length=1, max_length=200)
    job_description: str = ""


class CoverLetterOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    content: str
    job_description: Optional[str] = None
    company_name: str
    job_title: str
    status: str
    created_at: datetime
    updated_at: datetime


# ================= INDUSTRY INSIGHTS =================
# AI responses use camelCase keys; aliases accept them, snake_case is emitted.

class SalaryRange(BaseModel):
    role: str
    min: float
    max: float
    median: float
    location: str = "Remote"


class IndustryInsightData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    salary_ranges: List[SalaryRange] = Field(alias="salaryRanges", min_length=1)
    growth_rate: float = Field(alias="growthRate")
    demand_level: Literal["High", "Medium", "Low"] = Field(alias="demandLevel")
    top_skills: List[str] = Field(alias="topSkills")
    market_outlook: Literal["Positive", "Neutral", "Negative"] = Field(alias="marketOutlook")
    key_trends: List[str] = Field(alias="keyTrends")
    recommended_skills: List[str] = Field(alias="recommendedSkills")

    @field_validator("demand_level", "market_outlook", mode="before")
    @classmethod
    def _title_case(cls, v):
        # "HIGH" / "high" -> "High"
        return v.strip().capitalize() if isinstance(v, str) else v


class IndustryInsightOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    industry: str
    salary_ranges: List[SalaryRange]
    growth_rate: float
    demand_level: str
    top_skills: List[str]
    market_outlook: str
    key_trends: List[str]
    recommended_skills: List[str]
    last_updated: datetime
    next_update: datetime


# ================= INTERVIEW =================

class QuizQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: List[str] = Field(min_length=4, max_length=4)
    correct_answer: str = Field(alias="correctAnswer")
    explanation: str = ""

    @model_validator(mode="after")
    def _answer_in_options(self) -> "QuizQuestion":
        if self.correct_answer not in self.options:
            raise ValueError("correct answer must be one of the options")
        return self


class QuizPayload(BaseModel):
    questions: List[QuizQuestion] = Field(min_length=1)


class QuizResultRequest(BaseModel):
    questions: List[QuizQuestion] = Field(min_length=1)
    answers: List[Optional[str]]
    score: Optional[float] = Field(default=None, ge=0, le=100)


class QuestionResult(BaseModel):
    question: str
    answer: str
    user_answer: Optional[str] = None
    is_correct: bool
    explanation: str = ""


class AssessmentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    quiz_score: float
    questions: List[QuestionResult]
    category: str
    improvement_tip: Optional[str] = None
    created_at: datetime


class ScorePoint(BaseModel):
    date: str
    score: float


class AssessmentSummary(BaseModel):
    assessment_count: int
    average_score: float
    latest_score: Optional[float] = None
    total_questions: int
    trend: List[ScorePoint] = Field(default_factory=list)

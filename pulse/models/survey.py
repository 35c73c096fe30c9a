"""Survey question, response and submission models."""
from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Question(BaseModel):
    """A survey item. Immutable reference data."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    text: str = ""
    category: str = ""
    weight: float = Field(default=1.0, gt=0, description="Relative importance")
    is_active: bool = True


class QuestionCatalog(BaseModel):
    """Ordered question list, the unit cached in Redis."""
    questions: List[Question]


class SurveyResponse(BaseModel):
    """One answer to one question within a submission."""
    model_config = ConfigDict(frozen=True)

    question_id: str
    score: float


class SurveySubmission(BaseModel):
    """Request body for a daily survey submission."""
    responses: List[SurveyResponse]


class SurveyRecord(BaseModel):
    """A user's stored daily submission."""
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    survey_date: date
    total_score: float
    submitted_at: datetime
    responses: List[SurveyResponse] = Field(..., min_length=1)


class SurveyStatus(BaseModel):
    """Whether the user has answered today's survey."""
    completed: bool
    survey: Optional[SurveyRecord] = None

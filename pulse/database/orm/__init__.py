"""SQLAlchemy ORM models for HR Pulse."""
from pulse.database.base import Base
from pulse.database.orm.user import UserRow
from pulse.database.orm.question import QuestionRow
from pulse.database.orm.survey import SurveyRow
from pulse.database.orm.daily_score import DailyScoreRow
from pulse.database.orm.alert import AlertRow

__all__ = [
    "Base",
    "UserRow",
    "QuestionRow",
    "SurveyRow",
    "DailyScoreRow",
    "AlertRow",
]

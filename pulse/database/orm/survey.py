"""Daily survey submission ORM model."""
from sqlalchemy import String, Float, Date, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, date

from pulse.database.base import Base


class SurveyRow(Base):
    """One submission per user per day; answers kept as a JSON array."""
    __tablename__ = "surveys"
    __table_args__ = (
        UniqueConstraint("user_id", "survey_date", name="uq_surveys_user_date"),
    )

    id: Mapped[str] = mapped_column(String(80), primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    survey_date: Mapped[date] = mapped_column(Date)
    total_score: Mapped[float] = mapped_column(Float)
    submitted_at: Mapped[datetime] = mapped_column(DateTime)
    responses: Mapped[str] = mapped_column(Text)

    def __repr__(self):
        return f"<SurveyRow(id={self.id}, total_score={self.total_score})>"

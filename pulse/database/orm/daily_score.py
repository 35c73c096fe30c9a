"""Daily score ORM model."""
from sqlalchemy import String, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime, date
import uuid

from pulse.database.base import Base


class DailyScoreRow(Base):
    """Score history; the risk level is derived on read, never stored."""
    __tablename__ = "daily_scores"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4())
    )
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    score_date: Mapped[date] = mapped_column(Date)
    total_score: Mapped[float] = mapped_column(Float)
    calculated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow
    )

    def __repr__(self):
        return f"<DailyScoreRow(user_id={self.user_id}, date={self.score_date}, score={self.total_score})>"

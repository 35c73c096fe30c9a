"""Alert ORM model."""
from sqlalchemy import String, Boolean, DateTime, Integer, Sequence, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from typing import Optional
from datetime import datetime

from pulse.database.base import Base


class AlertRow(Base):
    """Alert inbox; ``seq`` records insertion order for tie-breaking."""
    __tablename__ = "alerts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    seq: Mapped[int] = mapped_column(
        Integer,
        Sequence("alerts_seq"),
        autoincrement=True
    )
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    target_user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    alert_type: Mapped[str] = mapped_column(String(30))
    title: Mapped[str] = mapped_column(String(255), default="")
    message: Mapped[str] = mapped_column(Text, default="")
    is_read: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow
    )

    def __repr__(self):
        return f"<AlertRow(id={self.id}, user_id={self.user_id}, read={self.is_read})>"

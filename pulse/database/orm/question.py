"""Survey question ORM model."""
from sqlalchemy import String, Float, Boolean, Integer
from sqlalchemy.orm import Mapped, mapped_column

from pulse.database.base import Base


class QuestionRow(Base):
    """Question catalog; ``position`` is the display order."""
    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    text: Mapped[str] = mapped_column(String(500))
    category: Mapped[str] = mapped_column(String(50))
    weight: Mapped[float] = mapped_column(Float, default=1.0)
    position: Mapped[int] = mapped_column(Integer, default=0)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self):
        return f"<QuestionRow(id={self.id}, category={self.category}, weight={self.weight})>"

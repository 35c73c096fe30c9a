"""Daily score snapshot and trend models."""
from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, computed_field

from .enums import RiskLevel, TrendDirection


class ScoreRecord(BaseModel):
    """Derived daily scoring snapshot for a user.

    ``risk_level`` is recomputed from ``total_score`` on every access so
    a stored tier can never drift from the current thresholds.
    """
    model_config = ConfigDict(frozen=True)

    user_id: str
    score_date: date
    total_score: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def risk_level(self) -> RiskLevel:
        # pulse.scoring imports pulse.models
        from pulse.scoring.risk_classifier import classify_risk

        return classify_risk(self.total_score)


class RiskSummary(BaseModel):
    """Latest risk tier of a user."""
    risk_level: RiskLevel
    score: float
    date: date

    @classmethod
    def from_record(cls, record: ScoreRecord) -> "RiskSummary":
        return cls(
            risk_level=record.risk_level,
            score=record.total_score,
            date=record.score_date,
        )


class ScorePoint(BaseModel):
    """One point of a score history chart."""
    date: date
    score: float
    risk_level: RiskLevel


class ScoreStats(BaseModel):
    """Windowed statistics over a score series."""
    average: float
    trend: TrendDirection
    change_from_previous: float


class ScoreHistory(BaseModel):
    """Score points of a trailing window plus their statistics."""
    user_id: str
    points: List[ScorePoint]
    stats: ScoreStats

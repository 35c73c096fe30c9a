"""Team roll-up models."""
from datetime import date
from typing import List

from pydantic import BaseModel, Field

from .enums import RiskLevel


class TeamMemberScore(BaseModel):
    """One member's latest scoring state."""
    id: str
    name: str
    department: str
    risk_level: RiskLevel
    score: float
    last_update_date: date


class RiskDistribution(BaseModel):
    """Member counts per risk tier."""
    high: int = 0
    medium: int = 0
    low: int = 0


class TeamDistribution(BaseModel):
    """Risk distribution of a team scope plus the member list."""
    total_members: int
    high_risk: int
    medium_risk: int
    low_risk: int
    members: List[TeamMemberScore] = Field(default_factory=list)

    @classmethod
    def from_members(cls, members: List[TeamMemberScore]) -> "TeamDistribution":
        return cls(
            total_members=len(members),
            high_risk=sum(1 for m in members if m.risk_level == RiskLevel.HIGH),
            medium_risk=sum(1 for m in members if m.risk_level == RiskLevel.MEDIUM),
            low_risk=sum(1 for m in members if m.risk_level == RiskLevel.LOW),
            members=members,
        )


class DepartmentBreakdown(BaseModel):
    """Per-department aggregate within a team scope."""
    department: str
    member_count: int
    average_score: float
    risk_distribution: RiskDistribution


class TeamStats(BaseModel):
    """Team distribution counts with a department breakdown."""
    total_members: int
    high_risk: int
    medium_risk: int
    low_risk: int
    department_breakdown: List[DepartmentBreakdown]

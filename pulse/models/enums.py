"""Enumeration types for HR Pulse."""
from enum import Enum


class RiskLevel(str, Enum):
    """Ordinal risk tier derived from a wellbeing score."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TrendDirection(str, Enum):
    """Direction of change between two trailing score windows."""
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class UserRole(str, Enum):
    """Roles resolved by the identity provider."""
    EMPLOYEE = "employee"
    MANAGER = "manager"
    HR = "hr"
    ADMIN = "admin"


class AlertType(str, Enum):
    """Alert categories created by escalation rules and reminders."""
    HIGH_RISK = "high_risk"
    SCORE_DROP = "score_drop"
    NO_RESPONSE = "no_response"
    SURVEY_REMINDER = "survey_reminder"
    SYSTEM = "system"


# Risk tier boundaries: score >= LOW -> low, score >= MEDIUM -> medium, else high
LOW_RISK_THRESHOLD: float = 4.0
MEDIUM_RISK_THRESHOLD: float = 2.5

# Roles allowed to view team roll-ups
TEAM_VIEW_ROLES: frozenset[UserRole] = frozenset(
    {UserRole.MANAGER, UserRole.HR, UserRole.ADMIN}
)

# Roles allowed to read the backend log buffer
LOG_VIEW_ROLES: frozenset[UserRole] = frozenset({UserRole.HR, UserRole.ADMIN})

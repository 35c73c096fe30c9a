"""Pydantic models for HR Pulse."""

# Common Models
from pulse.models.common import (
    HealthResponse,
    ErrorResponse,
    ERROR_RESPONSES,
    LogLinesResponse,
)

# Enums
from pulse.models.enums import (
    RiskLevel,
    TrendDirection,
    UserRole,
    AlertType,
    LOW_RISK_THRESHOLD,
    MEDIUM_RISK_THRESHOLD,
    TEAM_VIEW_ROLES,
    LOG_VIEW_ROLES,
)

# Users
from pulse.models.user import User, Identity

# Surveys
from pulse.models.survey import (
    Question,
    QuestionCatalog,
    SurveyResponse,
    SurveySubmission,
    SurveyRecord,
    SurveyStatus,
)

# Scores
from pulse.models.score import (
    ScoreRecord,
    RiskSummary,
    ScorePoint,
    ScoreStats,
    ScoreHistory,
)

# Alerts
from pulse.models.alert import (
    Alert,
    AlertSummary,
    AlertListResponse,
    UnreadCountResponse,
    ReadSnapshot,
    BulkReadResult,
    AlertReadStats,
    SingleReadResult,
)

# Team
from pulse.models.team import (
    TeamMemberScore,
    RiskDistribution,
    TeamDistribution,
    DepartmentBreakdown,
    TeamStats,
)

__all__ = [
    # Common
    "HealthResponse",
    "ErrorResponse",
    "ERROR_RESPONSES",
    "LogLinesResponse",
    # Enums
    "RiskLevel",
    "TrendDirection",
    "UserRole",
    "AlertType",
    "LOW_RISK_THRESHOLD",
    "MEDIUM_RISK_THRESHOLD",
    "TEAM_VIEW_ROLES",
    "LOG_VIEW_ROLES",
    # Users
    "User",
    "Identity",
    # Surveys
    "Question",
    "QuestionCatalog",
    "SurveyResponse",
    "SurveySubmission",
    "SurveyRecord",
    "SurveyStatus",
    # Scores
    "ScoreRecord",
    "RiskSummary",
    "ScorePoint",
    "ScoreStats",
    "ScoreHistory",
    # Alerts
    "Alert",
    "AlertSummary",
    "AlertListResponse",
    "UnreadCountResponse",
    "ReadSnapshot",
    "BulkReadResult",
    "AlertReadStats",
    "SingleReadResult",
    # Team
    "TeamMemberScore",
    "RiskDistribution",
    "TeamDistribution",
    "DepartmentBreakdown",
    "TeamStats",
]

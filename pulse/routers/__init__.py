"""Routers package - API endpoint routers."""

from .health import router as health_router
from .survey import router as survey_router
from .scoring import router as scoring_router
from .alerts import router as alerts_router
from .team import router as team_router
from .logs import router as logs_router

__all__ = [
    "health_router",
    "survey_router",
    "scoring_router",
    "alerts_router",
    "team_router",
    "logs_router",
]

"""Service wiring and caller identity for the HTTP layer.

The store backend is chosen by ``Settings.store_backend`` and built
once; tests replace it with ``configure_backend``.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from pulse.alerts import AlertLifecycleManager
from pulse.config import get_settings
from pulse.demo import DEMO_QUESTIONS, DEMO_USERS, generate_history, seed_alerts
from pulse.errors import Unauthorized
from pulse.models import Identity
from pulse.services import (
    AlertStore,
    CachedQuestionCatalog,
    IdentityProvider,
    InMemoryAlertStore,
    InMemoryQuestionCatalog,
    InMemoryScoreStore,
    InMemorySurveyStore,
    InMemoryUserDirectory,
    QuestionCatalogProvider,
    ScopeResolver,
    ScoreStore,
    SnowflakeAlertStore,
    SnowflakeQuestionCatalog,
    SnowflakeScoreStore,
    SnowflakeSurveyStore,
    SnowflakeUserDirectory,
    SurveyService,
    SurveyStore,
    get_redis_cache,
    get_snowflake_service,
)
from pulse.team import TeamAggregator

logger = logging.getLogger(__name__)


@dataclass
class Backend:
    """The collaborator set the core runs against."""
    catalog: QuestionCatalogProvider
    surveys: SurveyStore
    scores: ScoreStore
    alerts: AlertStore
    users: IdentityProvider
    scopes: ScopeResolver


def build_memory_backend(seed_demo: bool = True) -> Backend:
    """In-memory stores, optionally filled with demo fixtures."""
    directory = InMemoryUserDirectory(DEMO_USERS)
    backend = Backend(
        catalog=InMemoryQuestionCatalog(DEMO_QUESTIONS),
        surveys=InMemorySurveyStore(),
        scores=InMemoryScoreStore(),
        alerts=InMemoryAlertStore(),
        users=directory,
        scopes=directory,
    )
    if seed_demo:
        generate_history(backend.surveys, backend.scores)
        seed_alerts(backend.alerts)
    return backend


def build_snowflake_backend() -> Backend:
    """Snowflake stores sharing one connection."""
    db = get_snowflake_service()
    directory = SnowflakeUserDirectory(db)
    return Backend(
        catalog=SnowflakeQuestionCatalog(db),
        surveys=SnowflakeSurveyStore(db),
        scores=SnowflakeScoreStore(db),
        alerts=SnowflakeAlertStore(db),
        users=directory,
        scopes=directory,
    )


def _build_backend() -> Backend:
    settings = get_settings()
    if settings.store_backend == "snowflake":
        backend = build_snowflake_backend()
    else:
        backend = build_memory_backend()
    if settings.question_cache_enabled:
        backend.catalog = CachedQuestionCatalog(
            backend.catalog, get_redis_cache(), settings.cache_ttl_questions
        )
    logger.info(f"Store backend: {settings.store_backend}")
    return backend


# Singletons
_backend: Optional[Backend] = None
_survey_service: Optional[SurveyService] = None
_alert_manager: Optional[AlertLifecycleManager] = None
_team_aggregator: Optional[TeamAggregator] = None


def configure_backend(backend: Optional[Backend]) -> None:
    """Install a backend (``None`` to rebuild from settings) and drop dependent services."""
    global _backend, _survey_service, _alert_manager, _team_aggregator
    _backend = backend
    _survey_service = None
    _alert_manager = None
    _team_aggregator = None


def get_backend() -> Backend:
    """Get or build the backend singleton."""
    global _backend
    if _backend is None:
        _backend = _build_backend()
    return _backend


def get_survey_service() -> SurveyService:
    global _survey_service
    if _survey_service is None:
        backend = get_backend()
        _survey_service = SurveyService(backend.catalog, backend.surveys, backend.scores)
    return _survey_service


def get_alert_manager() -> AlertLifecycleManager:
    global _alert_manager
    if _alert_manager is None:
        _alert_manager = AlertLifecycleManager(get_backend().alerts)
    return _alert_manager


def get_team_aggregator() -> TeamAggregator:
    global _team_aggregator
    if _team_aggregator is None:
        backend = get_backend()
        _team_aggregator = TeamAggregator(backend.scores, backend.users, backend.scopes)
    return _team_aggregator


def get_current_user(x_user_id: Optional[str] = Header(default=None)) -> Identity:
    """Resolve the caller from the ``X-User-Id`` header.

    Raises:
        Unauthorized: Header missing, user unknown or inactive.
    """
    if not x_user_id or not x_user_id.strip():
        raise Unauthorized("Authentication required", details="Missing X-User-Id header")
    user = get_backend().users.get_user(x_user_id.strip())
    if user is None or not user.is_active:
        raise Unauthorized("Invalid user id", details=f"User {x_user_id} not found")
    return Identity.from_user(user)

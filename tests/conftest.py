"""Pytest fixtures and configuration."""
import pytest
from datetime import datetime, timedelta, timezone
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, AsyncMock
import fakeredis

from pulse.alerts import AlertLifecycleManager
from pulse.dependencies import Backend, configure_backend
from pulse.models import Alert, AlertType, Identity, Question, ScoreRecord, User, UserRole
from pulse.services import (
    InMemoryAlertStore,
    InMemoryQuestionCatalog,
    InMemoryScoreStore,
    InMemorySurveyStore,
    InMemoryUserDirectory,
    RedisCache,
    SurveyService,
)
from pulse.team import TeamAggregator

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
TODAY = NOW.date()


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def two_questions():
    """Two equally weighted questions."""
    return [
        Question(id="q1", text="Work satisfaction", category="engagement", weight=1.0),
        Question(id="q2", text="Workload", category="workload", weight=1.0),
    ]


@pytest.fixture
def users():
    """Manager 10 leads 11 and 12; 13 reports elsewhere; 14 is inactive."""
    return [
        User(id="10", name="Mina Manager", department="Engineering", role=UserRole.MANAGER),
        User(id="11", name="Eli Engineer", department="Engineering", manager_id="10"),
        User(id="12", name="Ada Analyst", department="Data", manager_id="10"),
        User(id="13", name="Max Marketer", department="Marketing", manager_id="20"),
        User(id="14", name="Ina Inactive", department="Engineering", manager_id="10", is_active=False),
        User(id="20", name="Hal Hr", department="Human Resources", role=UserRole.HR),
        User(id="30", name="Ari Admin", department="IT", role=UserRole.ADMIN),
    ]


@pytest.fixture
def directory(users):
    return InMemoryUserDirectory(users)


@pytest.fixture
def score_store():
    return InMemoryScoreStore()


@pytest.fixture
def survey_store():
    return InMemorySurveyStore()


@pytest.fixture
def alert_store():
    return InMemoryAlertStore()


@pytest.fixture
def survey_service(two_questions, survey_store, score_store):
    """Survey service on a fixed clock."""
    return SurveyService(
        InMemoryQuestionCatalog(two_questions),
        survey_store,
        score_store,
        clock=lambda: NOW,
    )


@pytest.fixture
def alert_manager(alert_store):
    return AlertLifecycleManager(alert_store)


@pytest.fixture
def team_aggregator(score_store, directory):
    return TeamAggregator(score_store, directory, directory, today=lambda: TODAY)


@pytest.fixture
def make_alert(now):
    """Factory for alerts owned by one user, ``minutes_ago`` before now."""
    def _make(alert_id, user_id="11", minutes_ago=0, is_read=False, alert_type=AlertType.HIGH_RISK):
        return Alert(
            id=alert_id,
            user_id=user_id,
            type=alert_type,
            title=f"Alert {alert_id}",
            is_read=is_read,
            created_at=now - timedelta(minutes=minutes_ago),
        )
    return _make


@pytest.fixture
def add_scores(score_store):
    """Append (days_ago, score) pairs for a user."""
    def _add(user_id, *points):
        for days_ago, score in points:
            score_store.append_score(ScoreRecord(
                user_id=user_id,
                score_date=TODAY - timedelta(days=days_ago),
                total_score=score,
            ))
    return _add


@pytest.fixture
def manager():
    return Identity(id="10", role=UserRole.MANAGER)


@pytest.fixture
def hr_user():
    return Identity(id="20", role=UserRole.HR)


@pytest.fixture
def employee():
    return Identity(id="11", role=UserRole.EMPLOYEE)


@pytest.fixture
def mock_snowflake():
    """Mock Snowflake service."""
    mock = MagicMock()
    mock.health_check = AsyncMock(return_value=(True, None))
    mock.execute_query = MagicMock(return_value=[])
    mock.execute_one = MagicMock(return_value=None)
    mock.execute_write = MagicMock(return_value=1)
    return mock


@pytest.fixture
def redis_cache():
    """Redis cache backed by fakeredis."""
    return RedisCache(host="localhost", port=6379, client=fakeredis.FakeRedis(decode_responses=True))


@pytest.fixture
def backend(two_questions, users, survey_store, score_store, alert_store, directory):
    return Backend(
        catalog=InMemoryQuestionCatalog(two_questions),
        surveys=survey_store,
        scores=score_store,
        alerts=alert_store,
        users=directory,
        scopes=directory,
    )


@pytest.fixture
def client(backend):
    """Test client wired to the in-memory backend."""
    from pulse.main import app
    configure_backend(backend)
    yield TestClient(app)
    configure_backend(None)


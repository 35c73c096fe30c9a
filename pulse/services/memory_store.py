"""In-memory store implementations.

Used by the test-suite and by the demo backend. Every store guards its
collections with an ``RLock``; records are frozen pydantic models, so
handing them out without copying is safe.
"""
import logging
import threading
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from pulse.errors import Conflict
from pulse.models import Alert, Question, ScoreRecord, SurveyRecord, User
from pulse.services.stores import (
    AlertStore,
    IdentityProvider,
    QuestionCatalogProvider,
    ScopeResolver,
    ScoreStore,
    SurveyStore,
)

logger = logging.getLogger(__name__)


class InMemoryQuestionCatalog(QuestionCatalogProvider):
    """Fixed question list."""

    def __init__(self, questions: Iterable[Question] = ()) -> None:
        self._questions: List[Question] = list(questions)

    def get_questions(self) -> List[Question]:
        return [q for q in self._questions if q.is_active]


class InMemorySurveyStore(SurveyStore):
    """Submissions keyed by (user_id, survey_date)."""

    def __init__(self) -> None:
        self._surveys: Dict[Tuple[str, date], SurveyRecord] = {}
        self._lock = threading.RLock()

    def get_survey(self, user_id: str, survey_date: date) -> Optional[SurveyRecord]:
        with self._lock:
            return self._surveys.get((user_id, survey_date))

    def add_survey(self, record: SurveyRecord) -> None:
        key = (record.user_id, record.survey_date)
        with self._lock:
            if key in self._surveys:
                raise Conflict(
                    f"Survey already submitted for {record.survey_date.isoformat()}",
                    details=f"user_id={record.user_id}",
                )
            self._surveys[key] = record

    def get_surveys_for_user(self, user_id: str) -> List[SurveyRecord]:
        with self._lock:
            rows = [s for (uid, _), s in self._surveys.items() if uid == user_id]
        return sorted(rows, key=lambda s: s.survey_date)

    def remove_survey(self, user_id: str, survey_date: date) -> bool:
        with self._lock:
            return self._surveys.pop((user_id, survey_date), None) is not None


class InMemoryScoreStore(ScoreStore):
    """Append-only score list per user."""

    def __init__(self) -> None:
        self._scores: Dict[str, List[ScoreRecord]] = {}
        self._lock = threading.RLock()

    def get_scores_for_user(self, user_id: str) -> List[ScoreRecord]:
        with self._lock:
            rows = list(self._scores.get(user_id, []))
        return sorted(rows, key=lambda s: s.score_date)

    def append_score(self, record: ScoreRecord) -> None:
        with self._lock:
            self._scores.setdefault(record.user_id, []).append(record)


class InMemoryAlertStore(AlertStore):
    """Alerts kept in insertion (creation) order."""

    def __init__(self, alerts: Iterable[Alert] = ()) -> None:
        self._alerts: Dict[str, Alert] = {}
        self._lock = threading.RLock()
        for alert in alerts:
            self.add_alert(alert)

    def get_alerts_for_user(self, user_id: str) -> List[Alert]:
        with self._lock:
            return [a for a in self._alerts.values() if a.user_id == user_id]

    def get_alert(self, alert_id: str) -> Optional[Alert]:
        with self._lock:
            return self._alerts.get(alert_id)

    def add_alert(self, alert: Alert) -> None:
        with self._lock:
            if alert.id in self._alerts:
                raise Conflict(f"Alert {alert.id} already exists")
            self._alerts[alert.id] = alert

    def mark_read(self, alert_id: str) -> bool:
        with self._lock:
            alert = self._alerts.get(alert_id)
            if alert is None or alert.is_read:
                return False
            # dict preserves position on value replacement
            self._alerts[alert_id] = alert.model_copy(update={"is_read": True})
            return True

    def mark_all_read(self, user_id: str) -> int:
        with self._lock:
            unread = [
                a for a in self._alerts.values()
                if a.user_id == user_id and not a.is_read
            ]
            for alert in unread:
                self._alerts[alert.id] = alert.model_copy(update={"is_read": True})
        logger.debug(f"Marked {len(unread)} alerts read for user {user_id}")
        return len(unread)


class InMemoryUserDirectory(IdentityProvider, ScopeResolver):
    """User directory doubling as identity provider and scope resolver."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: Dict[str, User] = {u.id: u for u in users}

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def get_direct_reports(self, manager_id: str) -> List[str]:
        return [u.id for u in self._users.values() if u.manager_id == manager_id]

    def get_active_users(self) -> List[str]:
        return [u.id for u in self._users.values() if u.is_active]

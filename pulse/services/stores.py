"""Collaborator interfaces consumed by the scoring and alert core.

Concrete implementations live in ``memory_store`` (tests, demo) and
``snowflake_stores`` (production). The core only ever sees these
abstract types, injected at construction.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from pulse.models import Alert, Question, ScoreRecord, SurveyRecord, User


class QuestionCatalogProvider(ABC):
    """Source of the active question catalog."""

    @abstractmethod
    def get_questions(self) -> List[Question]:
        """Return active questions in display order."""


class SurveyStore(ABC):
    """Daily survey submissions, unique per (user_id, survey_date)."""

    @abstractmethod
    def get_survey(self, user_id: str, survey_date: date) -> Optional[SurveyRecord]:
        """Return the user's submission for a date, if any."""

    @abstractmethod
    def add_survey(self, record: SurveyRecord) -> None:
        """Persist a submission.

        Raises:
            Conflict: A submission already exists for (user_id, survey_date).
        """

    @abstractmethod
    def get_surveys_for_user(self, user_id: str) -> List[SurveyRecord]:
        """Return the user's submissions ordered by survey_date ascending."""

    @abstractmethod
    def remove_survey(self, user_id: str, survey_date: date) -> bool:
        """Delete a submission. Returns True if one existed."""


class ScoreStore(ABC):
    """Append-only daily score snapshots."""

    @abstractmethod
    def get_scores_for_user(self, user_id: str) -> List[ScoreRecord]:
        """Return the user's scores ordered by score_date ascending."""

    @abstractmethod
    def append_score(self, record: ScoreRecord) -> None:
        """Append a score snapshot."""


class AlertStore(ABC):
    """Alert records. Alerts are created elsewhere; the core reads and marks them."""

    @abstractmethod
    def get_alerts_for_user(self, user_id: str) -> List[Alert]:
        """Return the user's alerts in creation order."""

    @abstractmethod
    def get_alert(self, alert_id: str) -> Optional[Alert]:
        """Return one alert by id."""

    @abstractmethod
    def add_alert(self, alert: Alert) -> None:
        """Store a newly created alert."""

    @abstractmethod
    def mark_read(self, alert_id: str) -> bool:
        """Set one alert read. Returns True if it was unread."""

    @abstractmethod
    def mark_all_read(self, user_id: str) -> int:
        """Set every unread alert of the user read in one atomic step.

        Returns:
            Number of alerts transitioned.
        """


class IdentityProvider(ABC):
    """Resolves user ids to directory entries."""

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Return the user, or None when unknown."""


class ScopeResolver(ABC):
    """Resolves team scopes to member ids."""

    @abstractmethod
    def get_direct_reports(self, manager_id: str) -> List[str]:
        """Ids of the manager's direct reports."""

    @abstractmethod
    def get_active_users(self) -> List[str]:
        """Ids of all active users."""

"""Snowflake-backed implementations of the collaborator interfaces.

All SQL is parameterized. The bulk read is a single UPDATE so it is
atomic per user; Snowflake does not enforce UNIQUE, so the survey store
checks for an existing (user_id, survey_date) row before inserting and
the survey service serializes submissions per user.
"""
import json
import logging
from datetime import date, datetime, timezone
from typing import Any, List, Optional
from uuid import uuid4

from pulse.errors import Conflict
from pulse.models import (
    Alert,
    AlertType,
    Question,
    ScoreRecord,
    SurveyRecord,
    SurveyResponse,
    User,
    UserRole,
)
from pulse.services.snowflake import SnowflakeService
from pulse.services.stores import (
    AlertStore,
    IdentityProvider,
    QuestionCatalogProvider,
    ScopeResolver,
    ScoreStore,
    SurveyStore,
)

logger = logging.getLogger(__name__)

_ALERT_COLUMNS = "id, user_id, target_user_id, alert_type, title, message, is_read, created_at"
_USER_COLUMNS = "id, email, name, department, position, manager_id, role, is_active"


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _row_to_alert(row: dict[str, Any]) -> Alert:
    return Alert(
        id=row["id"],
        user_id=row["user_id"],
        target_user_id=row.get("target_user_id"),
        type=AlertType(row["alert_type"]),
        title=row.get("title") or "",
        message=row.get("message") or "",
        is_read=bool(row["is_read"]),
        created_at=_as_utc(row["created_at"]),
    )


def _row_to_user(row: dict[str, Any]) -> User:
    return User(
        id=row["id"],
        email=row.get("email") or "",
        name=row["name"],
        department=row.get("department") or "",
        position=row.get("position") or "",
        manager_id=row.get("manager_id"),
        role=UserRole(row["role"]),
        is_active=bool(row["is_active"]),
    )


def _row_to_survey(row: dict[str, Any]) -> SurveyRecord:
    responses = row["responses"]
    if isinstance(responses, str):
        responses = json.loads(responses)
    return SurveyRecord(
        id=row["id"],
        user_id=row["user_id"],
        survey_date=row["survey_date"],
        total_score=float(row["total_score"]),
        submitted_at=_as_utc(row["submitted_at"]),
        responses=[SurveyResponse(**r) for r in responses],
    )


class SnowflakeQuestionCatalog(QuestionCatalogProvider):
    """Questions table, ordered by display position."""

    def __init__(self, db: SnowflakeService) -> None:
        self.db = db

    def get_questions(self) -> List[Question]:
        rows = self.db.execute_query(
            """
            SELECT id, text, category, weight, is_active
            FROM questions WHERE is_active = TRUE
            ORDER BY position
            """
        )
        return [
            Question(
                id=row["id"],
                text=row.get("text") or "",
                category=row.get("category") or "",
                weight=float(row["weight"]) if row["weight"] is not None else 1.0,
                is_active=bool(row["is_active"]),
            )
            for row in rows
        ]


class SnowflakeSurveyStore(SurveyStore):
    """Surveys table; responses are kept as a JSON array column."""

    def __init__(self, db: SnowflakeService) -> None:
        self.db = db

    def get_survey(self, user_id: str, survey_date: date) -> Optional[SurveyRecord]:
        row = self.db.execute_one(
            """
            SELECT id, user_id, survey_date, total_score, submitted_at, responses
            FROM surveys WHERE user_id = %s AND survey_date = %s
            """,
            (user_id, survey_date),
        )
        return _row_to_survey(row) if row else None

    def add_survey(self, record: SurveyRecord) -> None:
        if self.get_survey(record.user_id, record.survey_date) is not None:
            raise Conflict(
                f"Survey already submitted for {record.survey_date.isoformat()}",
                details=f"user_id={record.user_id}",
            )
        self.db.execute_write(
            """
            INSERT INTO surveys (id, user_id, survey_date, total_score, submitted_at, responses)
            VALUES (%s, %s, %s, %s, %s, %s)
            """,
            (
                record.id,
                record.user_id,
                record.survey_date,
                record.total_score,
                record.submitted_at,
                json.dumps([r.model_dump() for r in record.responses]),
            ),
        )
        logger.info(f"Inserted survey {record.id}")

    def get_surveys_for_user(self, user_id: str) -> List[SurveyRecord]:
        rows = self.db.execute_query(
            """
            SELECT id, user_id, survey_date, total_score, submitted_at, responses
            FROM surveys WHERE user_id = %s
            ORDER BY survey_date ASC
            """,
            (user_id,),
        )
        return [_row_to_survey(row) for row in rows]

    def remove_survey(self, user_id: str, survey_date: date) -> bool:
        deleted = self.db.execute_write(
            "DELETE FROM surveys WHERE user_id = %s AND survey_date = %s",
            (user_id, survey_date),
        )
        logger.info(f"Removed {deleted} survey rows for user {user_id} on {survey_date}")
        return deleted > 0


class SnowflakeScoreStore(ScoreStore):
    """daily_scores table. The risk tier is recomputed on read."""

    def __init__(self, db: SnowflakeService) -> None:
        self.db = db

    def get_scores_for_user(self, user_id: str) -> List[ScoreRecord]:
        rows = self.db.execute_query(
            """
            SELECT user_id, score_date, total_score
            FROM daily_scores WHERE user_id = %s
            ORDER BY score_date ASC
            """,
            (user_id,),
        )
        return [
            ScoreRecord(
                user_id=row["user_id"],
                score_date=row["score_date"],
                total_score=float(row["total_score"]),
            )
            for row in rows
        ]

    def append_score(self, record: ScoreRecord) -> None:
        self.db.execute_write(
            """
            INSERT INTO daily_scores (id, user_id, score_date, total_score, calculated_at)
            VALUES (%s, %s, %s, %s, %s)
            """,
            (
                str(uuid4()),
                record.user_id,
                record.score_date,
                record.total_score,
                datetime.now(timezone.utc),
            ),
        )


class SnowflakeAlertStore(AlertStore):
    """alerts table; ``seq`` holds creation order."""

    def __init__(self, db: SnowflakeService) -> None:
        self.db = db

    def get_alerts_for_user(self, user_id: str) -> List[Alert]:
        rows = self.db.execute_query(
            f"SELECT {_ALERT_COLUMNS} FROM alerts WHERE user_id = %s ORDER BY seq ASC",
            (user_id,),
        )
        return [_row_to_alert(row) for row in rows]

    def get_alert(self, alert_id: str) -> Optional[Alert]:
        row = self.db.execute_one(
            f"SELECT {_ALERT_COLUMNS} FROM alerts WHERE id = %s",
            (alert_id,),
        )
        return _row_to_alert(row) if row else None

    def add_alert(self, alert: Alert) -> None:
        self.db.execute_write(
            """
            INSERT INTO alerts
            (id, user_id, target_user_id, alert_type, title, message, is_read, created_at)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
            """,
            (
                alert.id,
                alert.user_id,
                alert.target_user_id,
                alert.type.value,
                alert.title,
                alert.message,
                alert.is_read,
                alert.created_at,
            ),
        )

    def mark_read(self, alert_id: str) -> bool:
        updated = self.db.execute_write(
            "UPDATE alerts SET is_read = TRUE WHERE id = %s AND is_read = FALSE",
            (alert_id,),
        )
        return updated > 0

    def mark_all_read(self, user_id: str) -> int:
        updated = self.db.execute_write(
            "UPDATE alerts SET is_read = TRUE WHERE user_id = %s AND is_read = FALSE",
            (user_id,),
        )
        logger.info(f"Marked {updated} alerts read for user {user_id}")
        return updated


class SnowflakeUserDirectory(IdentityProvider, ScopeResolver):
    """users table as identity provider and scope resolver."""

    def __init__(self, db: SnowflakeService) -> None:
        self.db = db

    def get_user(self, user_id: str) -> Optional[User]:
        row = self.db.execute_one(
            f"SELECT {_USER_COLUMNS} FROM users WHERE id = %s",
            (user_id,),
        )
        return _row_to_user(row) if row else None

    def get_direct_reports(self, manager_id: str) -> List[str]:
        rows = self.db.execute_query(
            "SELECT id FROM users WHERE manager_id = %s ORDER BY id",
            (manager_id,),
        )
        return [row["id"] for row in rows]

    def get_active_users(self) -> List[str]:
        rows = self.db.execute_query(
            "SELECT id FROM users WHERE is_active = TRUE ORDER BY id"
        )
        return [row["id"] for row in rows]

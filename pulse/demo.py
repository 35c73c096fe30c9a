"""Demo fixtures: users, the question catalog, score history and alerts.

Used by the in-memory backend at startup and by ``scripts/seed_demo_data.py``.
"""
import random
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

import structlog

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
from pulse.scoring.weighted_score import WeightedScoreCalculator
from pulse.services.stores import AlertStore, ScoreStore, SurveyStore

logger = structlog.get_logger(__name__)

DEMO_QUESTIONS: List[Question] = [
    Question(id="1", text="How rewarding was your work today?", category="engagement", weight=1.2),
    Question(id="2", text="Are your relationships at work going well?", category="relationship", weight=1.0),
    Question(id="3", text="Does your workload feel appropriate?", category="workload", weight=1.1),
    Question(id="4", text="Is your manager's support sufficient?", category="support", weight=1.0),
    Question(id="5", text="Do you want to keep working here?", category="retention", weight=1.3),
]

DEMO_USERS: List[User] = [
    User(id="1", email="tanaka@company.com", name="Taro Tanaka", department="Engineering",
         position="Senior Engineer", manager_id="4"),
    User(id="2", email="sato@company.com", name="Hanako Sato", department="Engineering",
         position="Engineer", manager_id="4"),
    User(id="3", email="suzuki@company.com", name="Jiro Suzuki", department="Marketing",
         position="Marketing Specialist", manager_id="5"),
    User(id="4", email="yamada@company.com", name="Ichiro Yamada", department="Engineering",
         position="Engineering Manager", role=UserRole.MANAGER),
    User(id="5", email="watanabe@company.com", name="Misaki Watanabe", department="Marketing",
         position="Marketing Manager", role=UserRole.MANAGER),
    User(id="6", email="hr@company.com", name="Taro Jinji", department="Human Resources",
         position="HR Specialist", role=UserRole.HR),
    User(id="7", email="admin@company.com", name="Administrator", department="Corporate Planning",
         position="System Administrator", role=UserRole.ADMIN),
]

# Users left without an answer for "today" so the survey status view has both states
SKIP_TODAY_USER_IDS = frozenset({"1", "3", "5"})
RESPONSE_RATE = 0.9


def generate_history(
    surveys: SurveyStore,
    scores: ScoreStore,
    users: List[User] = DEMO_USERS,
    questions: List[Question] = DEMO_QUESTIONS,
    days: int = 30,
    today: Optional[date] = None,
    seed: Optional[int] = None,
) -> int:
    """Write ``days`` of random daily submissions; returns how many were written."""
    rng = random.Random(seed)
    calculator = WeightedScoreCalculator()
    today = today or datetime.now(timezone.utc).date()
    written = 0

    for offset in range(days - 1, -1, -1):
        survey_date = today - timedelta(days=offset)
        for user in users:
            if offset == 0 and user.id in SKIP_TODAY_USER_IDS:
                continue
            if rng.random() > RESPONSE_RATE:
                continue
            responses = [
                SurveyResponse(question_id=q.id, score=rng.randint(1, 5))
                for q in questions
            ]
            total = float(calculator.calculate(responses, questions).total_score)
            surveys.add_survey(SurveyRecord(
                id=f"{user.id}-{survey_date.isoformat()}",
                user_id=user.id,
                survey_date=survey_date,
                total_score=total,
                submitted_at=datetime.combine(survey_date, time(9, 0), tzinfo=timezone.utc),
                responses=responses,
            ))
            scores.append_score(ScoreRecord(user_id=user.id, score_date=survey_date, total_score=total))
            written += 1

    logger.info("demo_history_generated", days=days, surveys=written)
    return written


def demo_alerts(now: Optional[datetime] = None) -> List[Alert]:
    now = now or datetime.now(timezone.utc)
    return [
        Alert(
            id="1", user_id="6", target_user_id="1", type=AlertType.HIGH_RISK,
            title="High-risk member detected",
            message="Taro Tanaka (Engineering) is in a high-risk state. Please follow up.",
            created_at=now - timedelta(hours=2),
        ),
        Alert(
            id="2", user_id="4", target_user_id="2", type=AlertType.SCORE_DROP,
            title="Team member score dropped",
            message="Hanako Sato's score dropped by 25.3%. Please check in.",
            created_at=now - timedelta(hours=6),
        ),
        Alert(
            id="3", user_id="5", target_user_id="3", type=AlertType.NO_RESPONSE,
            title="Team member has not responded",
            message="Jiro Suzuki has not answered the survey for 7 days.",
            is_read=True,
            created_at=now - timedelta(days=1),
        ),
        Alert(
            id="4", user_id="1", target_user_id="1", type=AlertType.HIGH_RISK,
            title="High-risk state detected",
            message="Your current score is 2.1, which is high risk. Consider reaching out for support.",
            created_at=now - timedelta(hours=2),
        ),
    ]


def seed_alerts(store: AlertStore, now: Optional[datetime] = None) -> int:
    alerts = demo_alerts(now)
    for alert in alerts:
        store.add_alert(alert)
    return len(alerts)

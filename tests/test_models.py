"""Tests for Pydantic models."""
import pytest
from datetime import date, datetime, timezone
from pydantic import ValidationError
from pulse.models import (
    Alert, AlertSummary, AlertType, Identity, Question, RiskLevel, RiskSummary,
    ScoreRecord, SurveyRecord, TeamDistribution, TeamMemberScore, User, UserRole
)


class TestQuestionModels:
    """Tests for question models."""

    def test_default_weight(self):
        assert Question(id="q1").weight == 1.0

    @pytest.mark.parametrize("weight", [0, -1.0])
    def test_weight_must_be_positive(self, weight):
        with pytest.raises(ValidationError):
            Question(id="q1", weight=weight)

    def test_question_is_frozen(self):
        question = Question(id="q1")
        with pytest.raises(ValidationError):
            question.weight = 2.0


class TestScoreModels:
    """Tests for score records."""

    def test_risk_level_follows_score(self):
        record = ScoreRecord(user_id="1", score_date=date(2026, 10, 19), total_score=2.5)
        assert record.risk_level == RiskLevel.MEDIUM
        assert record.model_dump()["risk_level"] == RiskLevel.MEDIUM

    def test_risk_summary_from_record(self):
        record = ScoreRecord(user_id="1", score_date=date(2026, 10, 19), total_score=4.2)
        summary = RiskSummary.from_record(record)
        assert summary.risk_level == RiskLevel.LOW
        assert summary.score == 4.2
        assert summary.date == date(2026, 10, 19)

    def test_survey_record_needs_responses(self):
        with pytest.raises(ValidationError):
            SurveyRecord(
                id="1-2026-10-19",
                user_id="1",
                survey_date=date(2026, 10, 19),
                total_score=3.0,
                submitted_at=datetime.now(timezone.utc),
                responses=[],
            )


class TestAlertModels:
    """Tests for alert models."""

    def test_read_is_a_copy(self):
        alert = Alert(id="a", user_id="1", type=AlertType.HIGH_RISK, created_at=datetime.now(timezone.utc))
        read = alert.model_copy(update={"is_read": True})
        assert alert.is_read is False
        assert read.is_read is True

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Alert(id="a", user_id="1", type="gossip", created_at=datetime.now(timezone.utc))

    def test_summary(self):
        alert = Alert(id="a", user_id="1", type=AlertType.SYSTEM, created_at=datetime.now(timezone.utc))
        summary = AlertSummary.from_alert(alert)
        assert summary.id == "a"
        assert summary.type == AlertType.SYSTEM


class TestTeamModels:
    """Tests for team roll-up models."""

    def test_distribution_counts(self):
        members = [
            TeamMemberScore(id=str(i), name="n", department="d", risk_level=level, score=1.0,
                            last_update_date=date(2026, 10, 19))
            for i, level in enumerate([RiskLevel.HIGH, RiskLevel.HIGH, RiskLevel.LOW])
        ]
        result = TeamDistribution.from_members(members)
        assert result.total_members == 3
        assert (result.high_risk, result.medium_risk, result.low_risk) == (2, 0, 1)

    def test_empty_distribution(self):
        result = TeamDistribution.from_members([])
        assert result.total_members == 0
        assert result.members == []


class TestUserModels:
    """Tests for users and identities."""

    def test_defaults(self):
        user = User(id="1", name="Someone")
        assert user.role == UserRole.EMPLOYEE
        assert user.is_active is True

    def test_identity_from_user(self):
        identity = Identity.from_user(User(id="4", name="Boss", role=UserRole.MANAGER))
        assert identity == Identity(id="4", role=UserRole.MANAGER)

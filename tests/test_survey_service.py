"""Tests for survey submission and the per-user score views."""
from datetime import timedelta

import pytest

from pulse.errors import Conflict, InvalidInput, Unauthorized
from pulse.models import Question, RiskLevel, SurveyResponse, TrendDirection
from pulse.services import InMemoryQuestionCatalog, InMemoryScoreStore
from pulse.services.survey_service import validate_responses


def _responses(*pairs):
    return [SurveyResponse(question_id=qid, score=score) for qid, score in pairs]


class TestValidateResponses:
    """Tests for submission validation."""

    @pytest.mark.parametrize("pairs,message", [
        ((), "empty"),
        ((("q1", 3),), "all 2 questions"),
        ((("q1", 3), ("q9", 3)), "Unknown question"),
        ((("q1", 3), ("q1", 4)), "more than once"),
        ((("q1", 0), ("q2", 3)), "between 1 and 5"),
        ((("q1", 3), ("q2", 5.5)), "between 1 and 5"),
    ])
    def test_rejects(self, two_questions, pairs, message):
        with pytest.raises(InvalidInput, match=message):
            validate_responses(_responses(*pairs), two_questions)

    def test_accepts_full_answers(self, two_questions):
        validate_responses(_responses(("q2", 1), ("q1", 5)), two_questions)


class TestSubmitSurvey:
    """Tests for SurveyService.submit_survey."""

    def test_records_survey_and_score(self, survey_service, survey_store, score_store, now, today):
        record = survey_service.submit_survey("11", _responses(("q1", 5), ("q2", 3)))

        assert record.id == f"11-{today.isoformat()}"
        assert record.total_score == 4.0
        assert record.submitted_at == now
        assert record.survey_date == today
        assert survey_store.get_survey("11", today) == record
        [score] = score_store.get_scores_for_user("11")
        assert score.total_score == 4.0
        assert score.risk_level == RiskLevel.LOW

    def test_duplicate_day_conflicts(self, survey_service, score_store):
        survey_service.submit_survey("11", _responses(("q1", 2), ("q2", 2)))

        with pytest.raises(Conflict):
            survey_service.submit_survey("11", _responses(("q1", 5), ("q2", 5)))
        assert len(score_store.get_scores_for_user("11")) == 1

    def test_failed_score_write_rolls_back_survey(self, two_questions, survey_store, score_store, now, today):
        from pulse.services import SurveyService

        class FailingScoreStore(InMemoryScoreStore):
            def append_score(self, record):
                raise IOError("daily_scores unavailable")

        catalog = InMemoryQuestionCatalog(two_questions)
        failing = SurveyService(catalog, survey_store, FailingScoreStore(), clock=lambda: now)

        with pytest.raises(IOError):
            failing.submit_survey("11", _responses(("q1", 4), ("q2", 4)))
        assert survey_store.get_survey("11", today) is None

        retry = SurveyService(catalog, survey_store, score_store, clock=lambda: now)
        retry.submit_survey("11", _responses(("q1", 4), ("q2", 4)))
        assert survey_store.get_survey("11", today) is not None
        [score] = score_store.get_scores_for_user("11")
        assert score.total_score == 4.0

    def test_explicit_date(self, survey_service, today):
        yesterday = today - timedelta(days=1)
        record = survey_service.submit_survey("11", _responses(("q1", 2), ("q2", 2)), survey_date=yesterday)

        assert record.id == f"11-{yesterday.isoformat()}"
        survey_service.submit_survey("11", _responses(("q1", 2), ("q2", 2)))

    def test_missing_user(self, survey_service):
        with pytest.raises(Unauthorized):
            survey_service.submit_survey("", _responses(("q1", 2), ("q2", 2)))

    def test_inactive_questions_not_expected(self, survey_store, score_store, now):
        from pulse.services import SurveyService

        catalog = InMemoryQuestionCatalog([
            Question(id="q1"),
            Question(id="q2", is_active=False),
        ])
        service = SurveyService(catalog, survey_store, score_store, clock=lambda: now)
        assert service.submit_survey("11", _responses(("q1", 4))).total_score == 4.0


class TestScoreViews:
    """Tests for status, current risk and history."""

    def test_status(self, survey_service):
        assert survey_service.get_survey_status("11").completed is False

        survey_service.submit_survey("11", _responses(("q1", 4), ("q2", 4)))
        status = survey_service.get_survey_status("11")
        assert status.completed is True
        assert status.survey.total_score == 4.0

    def test_current_risk(self, survey_service, add_scores, today):
        assert survey_service.get_current_risk("11") is None

        add_scores("11", (0, 2.0), (5, 4.5))
        summary = survey_service.get_current_risk("11")
        assert summary.risk_level == RiskLevel.HIGH
        assert summary.score == 2.0
        assert summary.date == today

    def test_history_window(self, survey_service, add_scores, today):
        add_scores("11", *[(d, 2.0 if d >= 7 else 3.0) for d in range(40)])

        history = survey_service.get_score_history("11", days=14)
        assert len(history.points) == 14
        assert history.points[0].date == today - timedelta(days=13)
        assert history.points[-1].date == today
        assert history.stats.trend == TrendDirection.UP
        assert history.stats.change_from_previous == pytest.approx(1.0)

    def test_history_without_scores(self, survey_service):
        history = survey_service.get_score_history("11")
        assert history.points == []
        assert history.stats.trend == TrendDirection.STABLE

    @pytest.mark.parametrize("days", [0, 366])
    def test_history_days_bounds(self, survey_service, days):
        with pytest.raises(InvalidInput):
            survey_service.get_score_history("11", days=days)

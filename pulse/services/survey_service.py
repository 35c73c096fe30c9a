"""Survey submission and per-user score views.

Orchestrates validation → weighted scoring → risk classification →
persistence of the SurveyRecord / ScoreRecord pair, and serves the
status, current-risk and history reads built on top of them.
"""
from datetime import date, datetime, timedelta, timezone
from typing import Callable, List, Optional, Sequence

import structlog

from pulse.errors import Conflict, InvalidInput, Unauthorized
from pulse.models import (
    Question,
    RiskSummary,
    ScoreHistory,
    ScorePoint,
    ScoreRecord,
    SurveyRecord,
    SurveyResponse,
    SurveyStatus,
)
from pulse.scoring.trend_analyzer import analyze_trend
from pulse.scoring.weighted_score import WeightedScoreCalculator
from pulse.services.locks import KeyedLock
from pulse.services.stores import QuestionCatalogProvider, ScoreStore, SurveyStore

logger = structlog.get_logger(__name__)

MIN_RESPONSE_SCORE: float = 1.0
MAX_RESPONSE_SCORE: float = 5.0
DEFAULT_HISTORY_DAYS: int = 30
MAX_HISTORY_DAYS: int = 365


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def validate_responses(responses: Sequence[SurveyResponse], catalog: Sequence[Question]) -> None:
    """Reject submissions that do not answer the catalog exactly once each.

    Raises:
        InvalidInput: empty, wrong length, unknown or repeated question, score off the 1-5 scale.
    """
    if not responses:
        raise InvalidInput("Survey responses are empty")
    if len(responses) != len(catalog):
        raise InvalidInput(
            f"Answers for all {len(catalog)} questions are required",
            details=f"Expected {len(catalog)} responses, got {len(responses)}",
        )
    known = {q.id for q in catalog}
    seen: set[str] = set()
    for index, response in enumerate(responses, start=1):
        if response.question_id not in known:
            raise InvalidInput(f"Unknown question id: {response.question_id}")
        if response.question_id in seen:
            raise InvalidInput(f"Question {response.question_id} answered more than once")
        seen.add(response.question_id)
        if not MIN_RESPONSE_SCORE <= response.score <= MAX_RESPONSE_SCORE:
            raise InvalidInput(
                f"Score must be between {MIN_RESPONSE_SCORE:g} and {MAX_RESPONSE_SCORE:g} (answer {index})",
                details=f"Score {response.score} is out of range",
            )


class SurveyService:
    """Survey submission plus the reads that depend on score history."""

    def __init__(
        self,
        catalog: QuestionCatalogProvider,
        surveys: SurveyStore,
        scores: ScoreStore,
        calculator: Optional[WeightedScoreCalculator] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.catalog = catalog
        self.surveys = surveys
        self.scores = scores
        self.calculator = calculator or WeightedScoreCalculator()
        self.clock = clock
        self._user_locks = KeyedLock()

    def today(self) -> date:
        return self.clock().date()

    def get_questions(self) -> List[Question]:
        return self.catalog.get_questions()

    def submit_survey(
        self,
        user_id: str,
        responses: Sequence[SurveyResponse],
        survey_date: Optional[date] = None,
    ) -> SurveyRecord:
        """Score and record a daily submission.

        Raises:
            Unauthorized: No user id.
            InvalidInput: Malformed responses.
            Conflict: A submission already exists for that date.
        """
        if not user_id:
            raise Unauthorized("User id is required")
        catalog = self.catalog.get_questions()
        validate_responses(responses, catalog)

        submitted_at = self.clock()
        survey_date = survey_date or submitted_at.date()
        result = self.calculator.calculate(responses, catalog)

        record = SurveyRecord(
            id=f"{user_id}-{survey_date.isoformat()}",
            user_id=user_id,
            survey_date=survey_date,
            total_score=float(result.total_score),
            submitted_at=submitted_at,
            responses=list(responses),
        )
        score = ScoreRecord(
            user_id=user_id,
            score_date=survey_date,
            total_score=record.total_score,
        )

        with self._user_locks.hold(user_id):
            if self.surveys.get_survey(user_id, survey_date) is not None:
                raise Conflict(
                    f"Survey already submitted for {survey_date.isoformat()}",
                    details=f"user_id={user_id}",
                )
            self.surveys.add_survey(record)
            try:
                self.scores.append_score(score)
            except Exception:
                # a SurveyRecord never outlives a failed ScoreRecord write
                self.surveys.remove_survey(user_id, survey_date)
                logger.error(
                    "survey_rolled_back",
                    user_id=user_id,
                    survey_date=survey_date.isoformat(),
                )
                raise

        logger.info(
            "survey_scored",
            user_id=user_id,
            survey_date=survey_date.isoformat(),
            total_score=record.total_score,
            risk_level=score.risk_level.value,
        )
        return record

    def get_survey_status(self, user_id: str, today: Optional[date] = None) -> SurveyStatus:
        survey = self.surveys.get_survey(user_id, today or self.today())
        return SurveyStatus(completed=survey is not None, survey=survey)

    def get_current_risk(self, user_id: str) -> Optional[RiskSummary]:
        """Latest score of the user as a risk summary, None without history."""
        history = self.scores.get_scores_for_user(user_id)
        if not history:
            return None
        latest = max(history, key=lambda s: s.score_date)
        return RiskSummary.from_record(latest)

    def get_score_history(
        self,
        user_id: str,
        days: int = DEFAULT_HISTORY_DAYS,
        today: Optional[date] = None,
    ) -> ScoreHistory:
        """Score points of the trailing ``days`` window with trend statistics."""
        if not 1 <= days <= MAX_HISTORY_DAYS:
            raise InvalidInput(f"days must be between 1 and {MAX_HISTORY_DAYS}")
        end = today or self.today()
        start = end - timedelta(days=days - 1)
        records = [
            s for s in self.scores.get_scores_for_user(user_id)
            if start <= s.score_date <= end
        ]
        records.sort(key=lambda s: s.score_date)
        points = [
            ScorePoint(date=s.score_date, score=s.total_score, risk_level=s.risk_level)
            for s in records
        ]
        return ScoreHistory(
            user_id=user_id,
            points=points,
            stats=analyze_trend([p.score for p in points]),
        )

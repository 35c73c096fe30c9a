"""Daily survey endpoints."""
from fastapi import APIRouter, Depends, Query, status
from pulse.dependencies import get_current_user, get_survey_service
from pulse.models import (
    ERROR_RESPONSES, Identity, QuestionCatalog, ScoreHistory,
    SurveyRecord, SurveyStatus, SurveySubmission
)
from pulse.services.survey_service import DEFAULT_HISTORY_DAYS, MAX_HISTORY_DAYS

router = APIRouter(prefix="/api/v1/survey", tags=["Survey"], responses=ERROR_RESPONSES)


@router.get(
    "/questions",
    response_model=QuestionCatalog,
    summary="Active Questions"
)
async def get_questions(caller: Identity = Depends(get_current_user)):
    """Active survey questions in display order."""
    return QuestionCatalog(questions=get_survey_service().get_questions())


@router.post(
    "/submit",
    response_model=SurveyRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Submit Daily Survey"
)
async def submit_survey(
    submission: SurveySubmission,
    caller: Identity = Depends(get_current_user)
):
    """Score and store today's answers. One submission per user per day."""
    return get_survey_service().submit_survey(caller.id, submission.responses)


@router.get(
    "/status",
    response_model=SurveyStatus,
    summary="Today's Survey Status"
)
async def get_survey_status(caller: Identity = Depends(get_current_user)):
    """Whether the caller has answered today, with the submission if so."""
    return get_survey_service().get_survey_status(caller.id)


@router.get(
    "/history",
    response_model=ScoreHistory,
    summary="Score History"
)
async def get_score_history(
    days: int = Query(DEFAULT_HISTORY_DAYS, ge=1, le=MAX_HISTORY_DAYS),
    caller: Identity = Depends(get_current_user)
):
    """The caller's daily scores over the trailing window with trend stats."""
    return get_survey_service().get_score_history(caller.id, days=days)

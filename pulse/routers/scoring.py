"""Risk scoring endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends
from pulse.dependencies import get_current_user, get_survey_service, get_team_aggregator
from pulse.models import ERROR_RESPONSES, Identity, RiskSummary, TeamDistribution

router = APIRouter(prefix="/api/v1/scoring", tags=["Scoring"], responses=ERROR_RESPONSES)


@router.get(
    "/current",
    response_model=Optional[RiskSummary],
    summary="Current Risk"
)
async def get_current_risk(caller: Identity = Depends(get_current_user)):
    """Latest risk level of the caller; null without any score history."""
    return get_survey_service().get_current_risk(caller.id)


@router.get(
    "/team",
    response_model=TeamDistribution,
    summary="Team Risk Distribution"
)
async def get_team_risk(caller: Identity = Depends(get_current_user)):
    """Risk distribution of every member in the caller's scope."""
    return get_team_aggregator().build_distribution(caller)

"""Team roll-up endpoints for managers, HR and admins."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from pulse.dependencies import get_current_user, get_team_aggregator
from pulse.models import ERROR_RESPONSES, Identity, RiskLevel, TeamDistribution, TeamStats

router = APIRouter(prefix="/api/v1/team", tags=["Team"], responses=ERROR_RESPONSES)


@router.get(
    "/members",
    response_model=TeamDistribution,
    summary="Team Members"
)
async def get_team_members(
    department: Optional[str] = Query(None),
    risk_level: Optional[RiskLevel] = Query(None),
    caller: Identity = Depends(get_current_user)
):
    """Members in the caller's scope, optionally filtered."""
    return get_team_aggregator().build_distribution(
        caller, department=department, risk_level=risk_level
    )


@router.get(
    "/stats",
    response_model=TeamStats,
    summary="Team Statistics"
)
async def get_team_stats(caller: Identity = Depends(get_current_user)):
    """Risk counts with a per-department breakdown."""
    return get_team_aggregator().build_stats(caller)

"""Alert inbox endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from pulse.dependencies import get_alert_manager, get_current_user
from pulse.models import (
    AlertListResponse, BulkReadResult, ERROR_RESPONSES, Identity,
    SingleReadResult, UnreadCountResponse
)

router = APIRouter(prefix="/api/v1/alerts", tags=["Alerts"], responses=ERROR_RESPONSES)


@router.get(
    "",
    response_model=AlertListResponse,
    summary="List Alerts"
)
async def list_alerts(
    unread_only: bool = Query(False),
    limit: Optional[int] = Query(None, description="Clamped to 1..100, default 50"),
    caller: Identity = Depends(get_current_user)
):
    """The caller's alerts, newest first."""
    items = get_alert_manager().list_alerts(caller.id, unread_only=unread_only, limit=limit)
    return AlertListResponse(
        items=items,
        total=len(items),
        unread_only=unread_only,
        user_id=caller.id
    )


@router.get(
    "/unread-count",
    response_model=UnreadCountResponse,
    summary="Unread Alert Count"
)
async def get_unread_count(caller: Identity = Depends(get_current_user)):
    """Number of unread alerts of the caller."""
    return UnreadCountResponse(
        user_id=caller.id,
        unread_count=get_alert_manager().unread_count(caller.id)
    )


@router.post(
    "/read-all",
    response_model=BulkReadResult,
    summary="Mark All Alerts Read"
)
async def mark_all_read(caller: Identity = Depends(get_current_user)):
    """Mark every unread alert of the caller read. Safe to repeat."""
    return get_alert_manager().mark_all_read(caller.id)


@router.post(
    "/{alert_id}/read",
    response_model=SingleReadResult,
    summary="Mark Alert Read"
)
async def mark_read(alert_id: str, caller: Identity = Depends(get_current_user)):
    """Mark one of the caller's alerts read."""
    return get_alert_manager().mark_read(caller.id, alert_id)

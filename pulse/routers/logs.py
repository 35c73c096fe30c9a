"""Admin endpoint for the backend log buffer."""
from typing import Optional
from fastapi import APIRouter, Depends, Query

from pulse.dependencies import get_current_user
from pulse.errors import Forbidden, InvalidInput
from pulse.log_buffer import get_log_lines
from pulse.models import ERROR_RESPONSES, Identity, LogLinesResponse, LOG_VIEW_ROLES

router = APIRouter(prefix="/api/v1/admin", tags=["Admin"], responses=ERROR_RESPONSES)


@router.get("/logs", response_model=LogLinesResponse)
async def get_logs(
    level: Optional[str] = Query(None, description="Minimum level, e.g. WARNING"),
    limit: Optional[int] = Query(None, ge=1),
    caller: Identity = Depends(get_current_user)
):
    """Return recent backend log lines (HR and admin only)."""
    if caller.role not in LOG_VIEW_ROLES:
        raise Forbidden(f"Role '{caller.role.value}' may not view logs")
    try:
        lines = get_log_lines(level=level, limit=limit)
    except ValueError as e:
        raise InvalidInput(str(e))
    return LogLinesResponse(lines=lines, total=len(lines))

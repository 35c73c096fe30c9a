"""Alert models and alert lifecycle payloads."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import AlertType


class Alert(BaseModel):
    """A notification owned by ``user_id``.

    Frozen: the only permitted change is unread -> read, which stores
    apply by replacing the record with ``model_copy``.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    target_user_id: Optional[str] = None
    type: AlertType
    title: str = ""
    message: str = ""
    is_read: bool = False
    created_at: datetime


class AlertSummary(BaseModel):
    """Compact alert view used in before/after snapshots."""
    id: str
    type: AlertType
    is_read: bool
    created_at: datetime

    @classmethod
    def from_alert(cls, alert: Alert) -> "AlertSummary":
        return cls(
            id=alert.id,
            type=alert.type,
            is_read=alert.is_read,
            created_at=alert.created_at,
        )


class AlertListResponse(BaseModel):
    """Ordered, filtered alert list for one user."""
    items: List[Alert]
    total: int
    unread_only: bool
    user_id: str


class UnreadCountResponse(BaseModel):
    """Unread badge counter."""
    user_id: str
    unread_count: int = Field(..., ge=0)


class ReadSnapshot(BaseModel):
    """State of a user's alerts captured before a bulk read."""
    total_alerts: int
    unread_alerts: int
    latest_unread_alerts: List[AlertSummary] = Field(default_factory=list, max_length=5)


class BulkReadResult(BaseModel):
    """Outcome of marking all of a user's alerts read."""
    updated_count: int = Field(..., ge=0)
    before_update: ReadSnapshot


class AlertReadStats(BaseModel):
    """User alert statistics captured before a single read."""
    total_alerts: int
    remaining_unread_count: int
    recent_alerts: List[AlertSummary] = Field(default_factory=list, max_length=3)


class SingleReadResult(BaseModel):
    """Outcome of marking one alert read."""
    alert_id: str
    already_read: bool
    alert: Alert
    user_stats: Optional[AlertReadStats] = None

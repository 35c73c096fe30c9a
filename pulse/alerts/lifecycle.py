"""Alert Lifecycle Manager.

State machine per alert
-----------------------
  unread ──mark_read / mark_all_read──▶ read

There is no way back to unread. Reads (``list_alerts``,
``unread_count``) take no lock and may observe a bulk read mid-flight;
mutations for one user are serialized so a snapshot and the transition
it describes always belong together.
"""
from typing import List, Optional, Sequence

import structlog

from pulse.errors import InvalidInput, NotFound, Unauthorized
from pulse.models import (
    Alert,
    AlertReadStats,
    AlertSummary,
    BulkReadResult,
    ReadSnapshot,
    SingleReadResult,
)
from pulse.services.locks import KeyedLock
from pulse.services.stores import AlertStore

logger = structlog.get_logger(__name__)

DEFAULT_ALERT_LIMIT: int = 50
MAX_ALERT_LIMIT: int = 100
BULK_READ_PREVIEW: int = 5     # unread alerts reported before a bulk read
SINGLE_READ_PREVIEW: int = 3   # recent alerts reported before a single read


def clamp_limit(limit: Optional[int]) -> int:
    """Missing or non-positive → default; anything above the cap → cap."""
    if limit is None or limit < 1:
        return DEFAULT_ALERT_LIMIT
    return min(limit, MAX_ALERT_LIMIT)


def order_newest_first(alerts: Sequence[Alert]) -> List[Alert]:
    """Sort by (created_at desc, creation sequence asc).

    ``alerts`` must be in creation order; equal timestamps keep it.
    """
    indexed = sorted(
        enumerate(alerts),
        key=lambda item: (-item[1].created_at.timestamp(), item[0]),
    )
    return [alert for _, alert in indexed]


def _require_user(user_id: str) -> None:
    if not user_id:
        raise Unauthorized("User id is required")


class AlertLifecycleManager:
    """Owns read/unread state of alerts stored in an ``AlertStore``."""

    def __init__(self, store: AlertStore) -> None:
        self.store = store
        self._user_locks = KeyedLock()

    # ── reads ─────────────────────────────────────────────────────────────────

    def list_alerts(
        self,
        user_id: str,
        unread_only: bool = False,
        limit: Optional[int] = None,
    ) -> List[Alert]:
        """The user's alerts, newest first, truncated to the clamped limit.

        Unknown users get an empty list.
        """
        _require_user(user_id)
        alerts = self.store.get_alerts_for_user(user_id)
        if unread_only:
            alerts = [a for a in alerts if not a.is_read]
        return order_newest_first(alerts)[:clamp_limit(limit)]

    def unread_count(self, user_id: str) -> int:
        _require_user(user_id)
        return sum(1 for a in self.store.get_alerts_for_user(user_id) if not a.is_read)

    def snapshot(self, user_id: str) -> ReadSnapshot:
        """Totals and the newest unread alerts, as reported before a bulk read."""
        _require_user(user_id)
        return self._snapshot(self.store.get_alerts_for_user(user_id))

    @staticmethod
    def _snapshot(alerts: Sequence[Alert]) -> ReadSnapshot:
        unread = [a for a in alerts if not a.is_read]
        return ReadSnapshot(
            total_alerts=len(alerts),
            unread_alerts=len(unread),
            latest_unread_alerts=[
                AlertSummary.from_alert(a)
                for a in order_newest_first(unread)[:BULK_READ_PREVIEW]
            ],
        )

    # ── transitions ───────────────────────────────────────────────────────────

    def mark_all_read(self, user_id: str) -> BulkReadResult:
        """Mark every unread alert of the user read.

        The snapshot is taken and the transition applied while holding the
        user's lock, so two concurrent calls never both report the same
        unread alerts. Idempotent: a repeat call returns ``updated_count=0``.
        """
        _require_user(user_id)
        with self._user_locks.hold(user_id):
            before = self._snapshot(self.store.get_alerts_for_user(user_id))
            updated = self.store.mark_all_read(user_id)

        logger.info(
            "alerts_marked_read",
            user_id=user_id,
            updated_count=updated,
            total_alerts=before.total_alerts,
            unread_before=before.unread_alerts,
        )
        return BulkReadResult(updated_count=updated, before_update=before)

    def mark_read(self, user_id: str, alert_id: str) -> SingleReadResult:
        """Mark one of the user's alerts read.

        Raises:
            InvalidInput: Blank alert id.
            NotFound: The alert does not exist or belongs to another user.
        """
        _require_user(user_id)
        if not alert_id or not alert_id.strip():
            raise InvalidInput("Invalid alert id")

        with self._user_locks.hold(user_id):
            alert = self.store.get_alert(alert_id)
            if alert is None or alert.user_id != user_id:
                raise NotFound(f"Alert {alert_id} not found")
            if alert.is_read:
                return SingleReadResult(alert_id=alert_id, already_read=True, alert=alert)

            alerts = self.store.get_alerts_for_user(user_id)
            stats = AlertReadStats(
                total_alerts=len(alerts),
                remaining_unread_count=sum(
                    1 for a in alerts if not a.is_read and a.id != alert_id
                ),
                recent_alerts=[
                    AlertSummary.from_alert(a)
                    for a in order_newest_first(alerts)[:SINGLE_READ_PREVIEW]
                ],
            )
            self.store.mark_read(alert_id)

        logger.info("alert_marked_read", user_id=user_id, alert_id=alert_id)
        return SingleReadResult(
            alert_id=alert_id,
            already_read=False,
            alert=alert.model_copy(update={"is_read": True}),
            user_stats=stats,
        )

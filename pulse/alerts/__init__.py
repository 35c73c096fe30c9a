"""Alert lifecycle: ordered views, unread tracking and read transitions."""
from pulse.alerts.lifecycle import (
    AlertLifecycleManager,
    DEFAULT_ALERT_LIMIT,
    MAX_ALERT_LIMIT,
    clamp_limit,
    order_newest_first,
)

__all__ = [
    "AlertLifecycleManager",
    "DEFAULT_ALERT_LIMIT",
    "MAX_ALERT_LIMIT",
    "clamp_limit",
    "order_newest_first",
]

"""
Notification service for user-facing messages.
Messages are queued for the UI to drain; nothing blocks the caller.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Deque, List

logger = logging.getLogger(__name__)

LEVELS = ("success", "info", "warning", "error")

_LOG_LEVELS = {
    "success": logging.INFO,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class Notification:
    """A discrete message for the user."""
    message: str
    level: str = "info"  # "success", "info", "warning", "error"
    created_at: datetime = field(default_factory=datetime.now)


class NotificationQueue:
    """
    Outbox of notifications emitted by the tracker.
    The UI layer drains it whenever it re-renders.
    """

    def __init__(self, max_pending: int = 100):
        self._pending: Deque[Notification] = deque(maxlen=max_pending)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def push(self, message: str, level: str = "info") -> Notification:
        """
        Queue a notification and log it.

        Raises:
            ValueError: for an unknown level
        """
        if level not in LEVELS:
            raise ValueError(f"Unknown notification level: {level}")
        notification = Notification(message=message, level=level)
        self._pending.append(notification)
        logger.log(_LOG_LEVELS[level], message)
        return notification

    def drain(self) -> List[Notification]:
        """Return all pending notifications, oldest first, and clear the queue."""
        notifications = list(self._pending)
        self._pending.clear()
        return notifications

"""Toast-style feedback shared by every form on the page"""
from typing import Callable, Dict, List, Optional
import logging
import time

from app.models.notification import Notification

logger = logging.getLogger(__name__)


class FeedbackChannel:
    """
    Queue of transient notifications

    Notifications are kept in arrival order. Each one stays visible for
    display_seconds after it was emitted, regardless of the others. A UI
    either renders visible() on every frame, which drops expired entries,
    or pulls drain(), which hands each entry over exactly once and keeps
    it until then. Identical notifications are not merged.
    """

    def __init__(self, display_seconds: float = 4.0, clock: Optional[Callable[[], float]] = None):
        self.display_seconds = display_seconds
        self._clock = clock or time.monotonic
        self._entries: List[Dict] = []

    def notify(self, notification: Notification) -> None:
        """Queue a notification (fire-and-forget)"""
        self._entries.append({
            "notification": notification,
            "shown_at": self._clock(),
            "delivered": False
        })
        log = logger.info if notification.kind == "success" else logger.warning
        log(f"Notification ({notification.kind}): {notification.text}")

    def success(self, text: str) -> None:
        self.notify(Notification.success(text))

    def error(self, text: str) -> None:
        self.notify(Notification.error(text))

    def visible(self) -> List[Notification]:
        """Notifications still on screen, oldest first (marks them delivered)"""
        self._expire(keep_undelivered=False)
        for entry in self._entries:
            entry["delivered"] = True
        return [entry["notification"] for entry in self._entries]

    def drain(self) -> List[Notification]:
        """Notifications not yet handed to the UI, oldest first"""
        pending = []
        for entry in self._entries:
            if not entry["delivered"]:
                entry["delivered"] = True
                pending.append(entry["notification"])
        self._expire()
        return pending

    def _expired(self, entry: Dict, now: float) -> bool:
        return now - entry["shown_at"] >= self.display_seconds

    def _expire(self, keep_undelivered: bool = True) -> None:
        now = self._clock()
        self._entries = [
            entry for entry in self._entries
            if not self._expired(entry, now)
            or (keep_undelivered and not entry["delivered"])
        ]

# warm_admin/client/notifications.py
"""Toast-style notifications shown to the admin user."""
import logging
from typing import List, Tuple

log = logging.getLogger("warm_admin.notifications")


class Notifier:
    def success(self, message: str) -> None:
        raise NotImplementedError

    def error(self, message: str) -> None:
        raise NotImplementedError


class LogNotifier(Notifier):
    """Default notifier for console use: messages go to the log."""

    def success(self, message):
        log.info(message)

    def error(self, message):
        log.warning(message)


class RecordingNotifier(Notifier):
    """Keeps every notification as (level, message); handy in tests."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def success(self, message):
        self.messages.append(("success", message))

    def error(self, message):
        self.messages.append(("error", message))

"""Desktop notifications on session transitions."""

from __future__ import annotations

import threading

from plyer import notification

from pomodoro_cli.utils.logger import get_logger

APP_NAME = "Pomodoro CLI"
NOTIFICATION_TIMEOUT = 5  # seconds the notification stays visible


class DesktopNotifier:
    """Fire-and-forget desktop notifications.

    Delivery runs on a daemon thread so a slow notification daemon never
    stalls the timer. Failures are logged and dropped.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def notify(self, title: str, body: str) -> bool:
        """Request a notification. Always reports success to the caller."""
        if not self.enabled:
            return True

        thread = threading.Thread(
            target=self._deliver,
            args=(title, body),
            name="pomodoro-notify",
            daemon=True,
        )
        thread.start()
        return True

    def _deliver(self, title: str, body: str) -> None:
        try:
            notification.notify(
                title=title,
                message=body,
                app_name=APP_NAME,
                timeout=NOTIFICATION_TIMEOUT,
            )
        except Exception as e:
            get_logger("notify").debug("Notification %r not delivered: %s", title, e)

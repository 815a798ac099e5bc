import logging
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

KIND_SUCCESS = "success"
KIND_ERROR = "error"


@dataclass
class Notification:
    kind: str
    title: str
    description: str


class Notifier(QObject):
    """Kısa süreli kullanıcı bildirimleri (toast)."""

    notification_signal = Signal(str, str, str)  # kind, title, description

    def __init__(self):
        super().__init__()
        self.last_notification: Optional[Notification] = None

    def success(self, title: str, description: str = ""):
        logger.info("%s: %s", title, description)
        self._emit(Notification(KIND_SUCCESS, title, description))

    def error(self, title: str, description: str = ""):
        # validation errors are expected user input, not application faults
        logger.warning("%s: %s", title, description)
        self._emit(Notification(KIND_ERROR, title, description))

    def _emit(self, notification: Notification):
        self.last_notification = notification
        self.notification_signal.emit(notification.kind, notification.title, notification.description)

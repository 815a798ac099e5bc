"""
Login Simulator - sahte login akışı (idle / busy).

Gerçek bir kimlik doğrulama yok: boş olmayan her giriş, sabit bir gecikmeden
sonra başarılı olur.
"""
import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from todo_app.core.errors import ValidationError
from todo_app.models.data_models import GUEST_USER, User

logger = logging.getLogger(__name__)

DEFAULT_LOGIN_DELAY_MS = 1500

PROVIDER_GOOGLE = "google"
PROVIDER_EMAIL = "email"


class LoginSimulator(QObject):
    busy_changed_signal = Signal(bool)
    login_succeeded_signal = Signal(object, str)  # User, provider

    def __init__(self, delay_ms: int = DEFAULT_LOGIN_DELAY_MS):
        super().__init__()
        self.delay_ms = max(0, delay_ms)
        self.is_busy = False

        self._pending_user: Optional[User] = None
        self._pending_provider: Optional[str] = None

        self.timer = QTimer(self)
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(self._complete)

    def login_with_google(self) -> bool:
        """Google ile giriş simülasyonu."""
        return self._begin(GUEST_USER, PROVIDER_GOOGLE)

    def login_with_email(self, email: str, password: str) -> bool:
        """
        Email/şifre ile giriş simülasyonu.

        Raises:
            ValidationError: email veya şifre boşsa (busy durumuna geçilmez)
        """
        if not email or not password:
            raise ValidationError("credentials", "Please fill in all fields")
        return self._begin(User.from_email(email.strip()), PROVIDER_EMAIL)

    def cancel(self):
        """Bekleyen login'i iptal et (ekran kapatıldığında)."""
        if self.timer.isActive():
            self.timer.stop()
            logger.debug("Pending %s login cancelled", self._pending_provider)
        self._pending_user = None
        self._pending_provider = None
        self._set_busy(False)

    def _begin(self, user: User, provider: str) -> bool:
        if self.is_busy:
            logger.debug("Login already in progress, ignoring %s attempt", provider)
            return False
        self._pending_user = user
        self._pending_provider = provider
        self._set_busy(True)
        logger.info("Simulating %s login (%d ms)", provider, self.delay_ms)
        self.timer.start(self.delay_ms)
        return True

    def _complete(self):
        user, provider = self._pending_user, self._pending_provider
        self._pending_user = None
        self._pending_provider = None
        self._set_busy(False)
        if user is None:
            return
        logger.info("Logged in as %s via %s", user.email, provider)
        self.login_succeeded_signal.emit(user, provider)

    def _set_busy(self, busy: bool):
        if self.is_busy == busy:
            return
        self.is_busy = busy
        self.busy_changed_signal.emit(busy)

import logging

from PySide6.QtCore import QObject, QTimer, Signal

logger = logging.getLogger(__name__)

DEFAULT_SPLASH_DELAY_MS = 2000


class SplashTimer(QObject):
    """Splash ekranından login'e tek seferlik geçiş."""

    finished_signal = Signal()

    def __init__(self, delay_ms: int = DEFAULT_SPLASH_DELAY_MS):
        super().__init__()
        self.delay_ms = max(0, delay_ms)
        self.timer = QTimer(self)
        self.timer.setSingleShot(True)
        self.timer.timeout.connect(self._on_timeout)

    @property
    def is_pending(self) -> bool:
        return self.timer.isActive()

    def start(self):
        if self.timer.isActive():
            return
        logger.debug("Splash transition scheduled in %d ms", self.delay_ms)
        self.timer.start(self.delay_ms)

    def cancel(self):
        """Ekran kapanırsa bekleyen geçişi iptal et."""
        if self.timer.isActive():
            self.timer.stop()
            logger.debug("Splash transition cancelled")

    def _on_timeout(self):
        logger.info("Splash finished")
        self.finished_signal.emit()

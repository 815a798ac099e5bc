from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QProgressBar, QVBoxLayout, QWidget

from todo_app.core.splash_timer import SplashTimer


class SplashScreen(QWidget):
    navigate_signal = Signal(str)

    def __init__(self, delay_ms: int, parent=None):
        super().__init__(parent)
        self.setObjectName("SplashScreen")
        self.setAttribute(Qt.WA_StyledBackground, True)

        self.splash_timer = SplashTimer(delay_ms)
        self.splash_timer.finished_signal.connect(lambda: self.navigate_signal.emit("/login"))

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(12)

        icon = QLabel("📋")
        icon.setAlignment(Qt.AlignCenter)
        icon.setStyleSheet("font-size: 72px;")
        layout.addWidget(icon)

        title = QLabel("Todo Task Manager")
        title.setObjectName("SplashTitle")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("Track the things to make life easy")
        subtitle.setObjectName("SplashSubtitle")
        subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(subtitle)

        # Belirsiz ilerleme çubuğu (spinner yerine)
        spinner = QProgressBar()
        spinner.setRange(0, 0)
        spinner.setTextVisible(False)
        spinner.setFixedWidth(120)
        spinner.setFixedHeight(6)
        layout.addWidget(spinner, alignment=Qt.AlignCenter)

    def activate(self):
        self.splash_timer.start()

    def deactivate(self):
        self.splash_timer.cancel()

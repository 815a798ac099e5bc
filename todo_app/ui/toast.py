from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from todo_app.ui.styles import TOAST_COLORS


class ToastWidget(QFrame):
    """Notifier mesajlarını pencerenin altında kısa süreliğine gösterir."""

    def __init__(self, duration_ms: int = 3000, parent: QWidget = None):
        super().__init__(parent)
        self.duration_ms = duration_ms
        self.setObjectName("Toast")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 10, 14, 10)
        layout.setSpacing(2)

        self.lbl_title = QLabel("")
        self.lbl_title.setStyleSheet("font-weight: bold; color: #1e1e2e;")
        layout.addWidget(self.lbl_title)

        self.lbl_description = QLabel("")
        self.lbl_description.setStyleSheet("color: #1e1e2e;")
        self.lbl_description.setWordWrap(True)
        layout.addWidget(self.lbl_description)

        self.hide_timer = QTimer(self)
        self.hide_timer.setSingleShot(True)
        self.hide_timer.timeout.connect(self.hide)

        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.hide()

    def show_notification(self, kind: str, title: str, description: str):
        color = TOAST_COLORS.get(kind, TOAST_COLORS["success"])
        self.setStyleSheet(f"QFrame#Toast {{ background-color: {color}; border-radius: 8px; }}")
        self.lbl_title.setText(title)
        self.lbl_description.setText(description)
        self.lbl_description.setVisible(bool(description))
        self.adjustSize()
        self._reposition()
        self.show()
        self.raise_()
        # son mesaj süreyi sıfırlar
        self.hide_timer.start(self.duration_ms)

    def _reposition(self):
        parent = self.parentWidget()
        if parent is None:
            return
        x = max(0, (parent.width() - self.width()) // 2)
        y = max(0, parent.height() - self.height() - 24)
        self.move(x, y)

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget


class RegisterScreen(QWidget):
    """Kayıt ekranı yer tutucusu; kayıt akışı yok."""

    navigate_signal = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(16)

        title = QLabel("Sign up")
        title.setObjectName("ScreenTitle")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        note = QLabel("Registration is not available yet.")
        note.setObjectName("MutedLabel")
        note.setAlignment(Qt.AlignCenter)
        layout.addWidget(note)

        self.btn_back = QPushButton("Back to login")
        self.btn_back.setCursor(Qt.PointingHandCursor)
        self.btn_back.clicked.connect(lambda: self.navigate_signal.emit("/login"))
        layout.addWidget(self.btn_back, alignment=Qt.AlignCenter)

    def activate(self):
        pass

    def deactivate(self):
        pass

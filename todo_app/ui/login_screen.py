from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QLineEdit, QPushButton,
    QVBoxLayout, QWidget
)

from todo_app.core.errors import ValidationError
from todo_app.core.login_simulator import PROVIDER_GOOGLE, LoginSimulator
from todo_app.core.notifier import Notifier
from todo_app.models.data_models import User


class LoginScreen(QWidget):
    navigate_signal = Signal(str)
    logged_in_signal = Signal(object)  # User

    def __init__(self, login_simulator: LoginSimulator, notifier: Notifier, parent=None):
        super().__init__(parent)
        self.login_simulator = login_simulator
        self.notifier = notifier

        self.login_simulator.busy_changed_signal.connect(self.on_busy_changed)
        self.login_simulator.login_succeeded_signal.connect(self.on_login_succeeded)

        outer = QVBoxLayout(self)
        outer.setAlignment(Qt.AlignCenter)

        card = QFrame()
        card.setObjectName("LoginCard")
        card.setFixedWidth(400)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(30, 30, 30, 30)
        layout.setSpacing(14)
        outer.addWidget(card)

        # Başlık
        icon = QLabel("📋")
        icon.setAlignment(Qt.AlignCenter)
        icon.setStyleSheet("font-size: 40px;")
        layout.addWidget(icon)

        title = QLabel("Login Page")
        title.setObjectName("ScreenTitle")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("Track the things to make life easy")
        subtitle.setObjectName("MutedLabel")
        subtitle.setAlignment(Qt.AlignCenter)
        layout.addWidget(subtitle)

        self.btn_google = QPushButton("Sign in with Google")
        self.btn_google.setObjectName("GoogleButton")
        self.btn_google.setCursor(Qt.PointingHandCursor)
        self.btn_google.clicked.connect(self.google_login)
        layout.addWidget(self.btn_google)

        divider = QLabel("OR LOGIN WITH EMAIL")
        divider.setObjectName("MutedLabel")
        divider.setAlignment(Qt.AlignCenter)
        divider.setStyleSheet("font-size: 11px;")
        layout.addWidget(divider)

        # Form
        layout.addWidget(QLabel("Email or Phone No."))
        self.input_email = QLineEdit()
        self.input_email.setPlaceholderText("xyz@gmail.com")
        self.input_email.returnPressed.connect(self.email_login)
        layout.addWidget(self.input_email)

        layout.addWidget(QLabel("Password"))
        self.input_password = QLineEdit()
        self.input_password.setPlaceholderText("Enter password")
        self.input_password.setEchoMode(QLineEdit.Password)
        self.input_password.returnPressed.connect(self.email_login)
        layout.addWidget(self.input_password)

        self.btn_forgot = QPushButton("Forgot Password?")
        self.btn_forgot.setObjectName("LinkButton")
        self.btn_forgot.setCursor(Qt.PointingHandCursor)
        layout.addWidget(self.btn_forgot, alignment=Qt.AlignRight)

        btn_layout = QHBoxLayout()
        self.btn_submit = QPushButton("Submit")
        self.btn_submit.setObjectName("PrimaryButton")
        self.btn_submit.setCursor(Qt.PointingHandCursor)
        self.btn_submit.clicked.connect(self.email_login)
        btn_layout.addWidget(self.btn_submit)

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.setCursor(Qt.PointingHandCursor)
        self.btn_cancel.clicked.connect(lambda: self.navigate_signal.emit("/register"))
        btn_layout.addWidget(self.btn_cancel)
        layout.addLayout(btn_layout)

        signup_layout = QHBoxLayout()
        signup_layout.addStretch()
        no_account = QLabel("Don't have an account?")
        no_account.setObjectName("MutedLabel")
        signup_layout.addWidget(no_account)
        self.btn_signup = QPushButton("Sign up")
        self.btn_signup.setObjectName("LinkButton")
        self.btn_signup.setCursor(Qt.PointingHandCursor)
        self.btn_signup.clicked.connect(lambda: self.navigate_signal.emit("/register"))
        signup_layout.addWidget(self.btn_signup)
        signup_layout.addStretch()
        layout.addLayout(signup_layout)

    def google_login(self):
        self.login_simulator.login_with_google()

    def email_login(self):
        try:
            self.login_simulator.login_with_email(self.input_email.text(), self.input_password.text())
        except ValidationError as e:
            self.notifier.error("Error", str(e))

    def on_busy_changed(self, busy: bool):
        """Login sürerken butonları kilitle."""
        self.btn_google.setEnabled(not busy)
        self.btn_submit.setEnabled(not busy)
        self.btn_google.setText("Signing in..." if busy else "Sign in with Google")

    def on_login_succeeded(self, user: User, provider: str):
        if provider == PROVIDER_GOOGLE:
            self.notifier.success("Welcome back!", "Successfully logged in with Google")
        else:
            self.notifier.success("Welcome back!", "Successfully logged in")
        self.input_password.clear()
        self.logged_in_signal.emit(user)
        self.navigate_signal.emit("/tasks")

    def activate(self):
        self.input_email.setFocus()

    def deactivate(self):
        self.login_simulator.cancel()

import logging
from typing import Dict, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QWidget

from todo_app.config import Settings
from todo_app.core.login_simulator import LoginSimulator
from todo_app.core.notifier import Notifier
from todo_app.core.task_manager import TaskManager
from todo_app.ui.login_screen import LoginScreen
from todo_app.ui.register_screen import RegisterScreen
from todo_app.ui.splash_screen import SplashScreen
from todo_app.ui.task_screen import TaskScreen
from todo_app.ui.toast import ToastWidget

logger = logging.getLogger(__name__)

ROUTE_SPLASH = "/"
ROUTE_LOGIN = "/login"
ROUTE_TASKS = "/tasks"
ROUTE_REGISTER = "/register"


class MainWindow(QMainWindow):
    route_changed_signal = Signal(str)

    def __init__(self, settings: Settings, task_manager: Optional[TaskManager] = None):
        super().__init__()
        self.settings = settings
        self.setWindowTitle("Todo Task Manager")
        self.resize(720, 640)

        self.notifier = Notifier()
        self.task_manager = task_manager or TaskManager()
        self.login_simulator = LoginSimulator(settings.login_delay_ms)

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.splash_screen = SplashScreen(settings.splash_delay_ms)
        self.login_screen = LoginScreen(self.login_simulator, self.notifier)
        self.register_screen = RegisterScreen()
        self.task_screen = TaskScreen(self.task_manager, self.notifier)

        self.screens: Dict[str, QWidget] = {
            ROUTE_SPLASH: self.splash_screen,
            ROUTE_LOGIN: self.login_screen,
            ROUTE_REGISTER: self.register_screen,
            ROUTE_TASKS: self.task_screen,
        }
        for screen in self.screens.values():
            self.stack.addWidget(screen)
            screen.navigate_signal.connect(self.navigate)

        self.login_screen.logged_in_signal.connect(self.task_screen.set_user)

        self.toast = ToastWidget(settings.toast_duration_ms, self.stack)
        self.notifier.notification_signal.connect(self.toast.show_notification)

        self.current_route: Optional[str] = None

    def start(self):
        """Uygulamayı splash ekranından başlat."""
        self.navigate(ROUTE_SPLASH)

    def navigate(self, route: str):
        screen = self.screens.get(route)
        if screen is None:
            logger.warning("Unknown route %r, staying on %s", route, self.current_route)
            return
        if route == self.current_route:
            return

        previous = self.screens.get(self.current_route) if self.current_route else None
        if previous is not None:
            previous.deactivate()

        logger.info("Navigate %s -> %s", self.current_route, route)
        self.current_route = route
        self.stack.setCurrentWidget(screen)
        screen.activate()
        self.route_changed_signal.emit(route)

    def closeEvent(self, event):
        # bekleyen timer'lar pencere kapandıktan sonra çalışmasın
        current = self.screens.get(self.current_route) if self.current_route else None
        if current is not None:
            current.deactivate()
        super().closeEvent(event)

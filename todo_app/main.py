import logging
import os
import sys

from PySide6.QtCore import QtMsgType, qInstallMessageHandler
from PySide6.QtWidgets import QApplication

from todo_app.config import load_settings
from todo_app.core.task_manager import TaskManager
from todo_app.logging_setup import setup_logging
from todo_app.seeder import seed_tasks
from todo_app.ui.main_window import MainWindow
from todo_app.ui.styles import MODERN_DARK_THEME

qt_logger = logging.getLogger("todo_app.qt")

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def message_handler(msg_type, context, message):
    """Qt mesajlarını logging'e yönlendirir; FFmpeg/VDPAU gürültüsünü bastırır."""
    msg_lower = message.lower()
    if any(keyword in msg_lower for keyword in ['ffmpeg', 'vdpau', 'libvdpau']):
        return
    qt_logger.log(_QT_LEVELS.get(msg_type, logging.WARNING), message)


def main():
    settings = load_settings()
    setup_logging(console_level=settings.log_level, log_dir=settings.log_dir)

    os.environ.setdefault('QT_LOGGING_RULES', 'qt.multimedia.*=false')
    qInstallMessageHandler(message_handler)

    app = QApplication(sys.argv)
    app.setStyleSheet(MODERN_DARK_THEME)

    # Task koleksiyonunu hazırla (oturum boyunca bellekte)
    task_manager = TaskManager()
    if settings.seed_demo:
        seed_tasks(task_manager, settings.seed_count)

    window = MainWindow(settings, task_manager)
    window.show()
    window.start()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

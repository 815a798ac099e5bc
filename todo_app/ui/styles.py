# todo_app/ui/styles.py

PRIORITY_COLORS = {
    "high": "#f38ba8",    # Kırmızı
    "medium": "#f9e2af",  # Sarı
    "low": "#a6e3a1",     # Yeşil
}

TOAST_COLORS = {
    "success": "#a6e3a1",
    "error": "#f38ba8",
}

MODERN_DARK_THEME = """
/* Genel Pencere Ayarları */
QMainWindow {
    background-color: #1e1e2e;
}

QWidget {
    font-family: 'Segoe UI', 'Roboto', sans-serif;
    font-size: 14px;
    color: #cdd6f4;
}

QLabel {
    color: #cdd6f4;
}

/* Splash */
QWidget#SplashScreen {
    background-color: #89b4fa;
}
QLabel#SplashTitle {
    font-size: 36px;
    font-weight: bold;
    color: #1e1e2e;
}
QLabel#SplashSubtitle {
    font-size: 18px;
    color: #313244;
}

/* Başlıklar */
QLabel#ScreenTitle {
    font-size: 24px;
    font-weight: bold;
    color: #cdd6f4;
}
QLabel#MutedLabel {
    color: #a6adc8;
}

/* Login kartı */
QFrame#LoginCard {
    background-color: #313244;
    border: 1px solid #45475a;
    border-radius: 12px;
}

QLineEdit, QTextEdit, QDateEdit, QComboBox {
    background-color: #313244;
    border: 1px solid #45475a;
    border-radius: 5px;
    padding: 5px;
}

/* Butonlar */
QPushButton {
    background-color: #313244;
    border: 2px solid #45475a;
    border-radius: 8px;
    color: #ffffff;
    padding: 8px 16px;
    font-weight: bold;
}
QPushButton:hover {
    background-color: #45475a;
    border-color: #585b70;
}
QPushButton:pressed {
    background-color: #1e1e2e;
    border-color: #a6e3a1;
}
QPushButton:disabled {
    color: #6c7086;
}

QPushButton#GoogleButton {
    background-color: #f38ba8;
    color: #1e1e2e;
    border: none;
}
QPushButton#PrimaryButton {
    background-color: #f9e2af;
    color: #1e1e2e;
    border: none;
}
QPushButton#LinkButton {
    background-color: transparent;
    border: none;
    color: #89b4fa;
    padding: 2px;
}
QPushButton#IconButton {
    background-color: transparent;
    border: none;
    padding: 4px;
}
QPushButton#FabButton {
    background-color: #89b4fa;
    color: #1e1e2e;
    border: none;
    border-radius: 28px;
    font-size: 24px;
    padding: 0;
}

/* Task kartları */
QFrame#TaskCard {
    background-color: #313244;
    border: 1px solid #45475a;
    border-radius: 8px;
}
QLabel#TaskTitle {
    font-size: 16px;
    font-weight: 600;
}
QLabel#TaskTitleDone {
    font-size: 16px;
    font-weight: 600;
    color: #6c7086;
    text-decoration: line-through;
}

QTabWidget::pane {
    border: none;
}
QTabBar::tab {
    background-color: #313244;
    padding: 8px 20px;
    border-radius: 5px;
    margin-right: 4px;
}
QTabBar::tab:selected {
    background-color: #45475a;
    color: white;
}

QCheckBox {
    color: #bac2de;
    spacing: 10px;
}
"""

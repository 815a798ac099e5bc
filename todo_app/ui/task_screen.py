from typing import Dict, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton, QScrollArea,
    QTabWidget, QVBoxLayout, QWidget
)

from todo_app.core.notifier import Notifier
from todo_app.core.task_manager import TaskManager
from todo_app.models.data_models import Task, TaskStatus, User
from todo_app.ui.styles import PRIORITY_COLORS
from todo_app.ui.task_dialog import TaskDialog

DATE_FORMAT = "%B %d, %Y"


class TaskCard(QFrame):
    toggle_requested = Signal(int)
    edit_requested = Signal(int)
    delete_requested = Signal(int)

    def __init__(self, task: Task, parent=None):
        super().__init__(parent)
        self.task_id = task.id
        self.setObjectName("TaskCard")
        done = task.status is TaskStatus.COMPLETED

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 12, 14, 12)

        self.btn_toggle = QPushButton("✔" if done else "○")
        self.btn_toggle.setObjectName("IconButton")
        self.btn_toggle.setCursor(Qt.PointingHandCursor)
        self.btn_toggle.setToolTip("Mark as open" if done else "Mark as completed")
        self.btn_toggle.clicked.connect(lambda: self.toggle_requested.emit(self.task_id))
        layout.addWidget(self.btn_toggle, alignment=Qt.AlignTop)

        body = QVBoxLayout()
        title_row = QHBoxLayout()
        self.lbl_title = QLabel(task.title)
        self.lbl_title.setObjectName("TaskTitleDone" if done else "TaskTitle")
        self.lbl_title.setWordWrap(True)
        title_row.addWidget(self.lbl_title)

        badge = QLabel(task.priority.value)
        badge.setStyleSheet(
            f"background-color: {PRIORITY_COLORS[task.priority.value]}; color: #1e1e2e; "
            "border-radius: 6px; padding: 2px 8px; font-size: 12px; font-weight: bold;"
        )
        title_row.addWidget(badge)
        title_row.addStretch()
        body.addLayout(title_row)

        if task.description:
            desc = QLabel(task.description)
            desc.setObjectName("MutedLabel")
            desc.setWordWrap(True)
            if done:
                desc.setStyleSheet("text-decoration: line-through;")
            body.addWidget(desc)

        # Tamamlanan task'larda tamamlanma zamanı, açık olanlarda son tarih
        if done:
            meta = QLabel(f"🕒 Completed: {task.updated_at.strftime(DATE_FORMAT)}")
        elif task.due_date:
            meta = QLabel(f"📅 Due: {task.due_date.strftime(DATE_FORMAT)}")
        else:
            meta = None
        if meta is not None:
            meta.setObjectName("MutedLabel")
            meta.setStyleSheet("font-size: 12px;")
            body.addWidget(meta)
        layout.addLayout(body, stretch=1)

        if not done:
            self.btn_edit = QPushButton("✎")
            self.btn_edit.setObjectName("IconButton")
            self.btn_edit.setCursor(Qt.PointingHandCursor)
            self.btn_edit.setToolTip("Edit")
            self.btn_edit.clicked.connect(lambda: self.edit_requested.emit(self.task_id))
            layout.addWidget(self.btn_edit, alignment=Qt.AlignTop)
        else:
            self.btn_edit = None

        self.btn_delete = QPushButton("🗑")
        self.btn_delete.setObjectName("IconButton")
        self.btn_delete.setCursor(Qt.PointingHandCursor)
        self.btn_delete.setToolTip("Delete")
        self.btn_delete.clicked.connect(lambda: self.delete_requested.emit(self.task_id))
        layout.addWidget(self.btn_delete, alignment=Qt.AlignTop)


class TaskScreen(QWidget):
    navigate_signal = Signal(str)

    def __init__(self, task_manager: TaskManager, notifier: Notifier, parent=None):
        super().__init__(parent)
        self.task_manager = task_manager
        self.notifier = notifier
        self.task_dialog: Optional[TaskDialog] = None
        self.cards: Dict[TaskStatus, List[TaskCard]] = {TaskStatus.OPEN: [], TaskStatus.COMPLETED: []}

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(20, 16, 20, 20)
        main_layout.setSpacing(14)

        # Üst bar
        header = QHBoxLayout()
        title = QLabel("My Tasks")
        title.setObjectName("ScreenTitle")
        header.addWidget(title)
        header.addStretch()

        self.lbl_avatar = QLabel("JD")
        self.lbl_avatar.setAlignment(Qt.AlignCenter)
        self.lbl_avatar.setFixedSize(36, 36)
        self.lbl_avatar.setStyleSheet(
            "background-color: #45475a; border-radius: 18px; font-weight: bold;"
        )
        header.addWidget(self.lbl_avatar)

        self.btn_logout = QPushButton("⎋")
        self.btn_logout.setObjectName("IconButton")
        self.btn_logout.setToolTip("Log out")
        self.btn_logout.setCursor(Qt.PointingHandCursor)
        self.btn_logout.clicked.connect(lambda: self.navigate_signal.emit("/login"))
        header.addWidget(self.btn_logout)
        main_layout.addLayout(header)

        # Sekmeler
        self.tabs = QTabWidget()
        self.tab_layouts: Dict[TaskStatus, QVBoxLayout] = {}
        for status in (TaskStatus.OPEN, TaskStatus.COMPLETED):
            scroll = QScrollArea()
            scroll.setWidgetResizable(True)
            scroll.setStyleSheet("border: none;")
            container = QWidget()
            tab_layout = QVBoxLayout(container)
            tab_layout.setSpacing(10)
            tab_layout.setAlignment(Qt.AlignTop)
            scroll.setWidget(container)
            self.tab_layouts[status] = tab_layout
            self.tabs.addTab(scroll, "")
        main_layout.addWidget(self.tabs)

        # Floating action button
        self.btn_add = QPushButton("+", self)
        self.btn_add.setObjectName("FabButton")
        self.btn_add.setFixedSize(56, 56)
        self.btn_add.setCursor(Qt.PointingHandCursor)
        self.btn_add.setToolTip("Add task")
        self.btn_add.clicked.connect(self.open_add_dialog)

        self.task_manager.tasks_changed_signal.connect(self.refresh_task_list)
        self.refresh_task_list()

    @property
    def active_status(self) -> TaskStatus:
        return TaskStatus.OPEN if self.tabs.currentIndex() == 0 else TaskStatus.COMPLETED

    def set_user(self, user: User):
        self.lbl_avatar.setText(user.initials)
        self.lbl_avatar.setToolTip(f"{user.name} <{user.email}>")

    def refresh_task_list(self):
        """Her iki sekmeyi de baştan çiz."""
        for status, tab_layout in self.tab_layouts.items():
            self._clear_layout(tab_layout)
            self.cards[status] = []
            tasks = self.task_manager.filter_tasks(status)
            if not tasks:
                tab_layout.addWidget(self._empty_state(status))
                continue
            for task in tasks:
                card = TaskCard(task)
                card.toggle_requested.connect(self.toggle_task)
                card.edit_requested.connect(self.open_edit_dialog)
                card.delete_requested.connect(self.delete_task)
                tab_layout.addWidget(card)
                self.cards[status].append(card)

        self.tabs.setTabText(0, f"Open Tasks ({self.task_manager.count(TaskStatus.OPEN)})")
        self.tabs.setTabText(1, f"Completed ({self.task_manager.count(TaskStatus.COMPLETED)})")

    def open_add_dialog(self):
        self._open_dialog(None)

    def open_edit_dialog(self, task_id: int):
        self._open_dialog(task_id)

    def toggle_task(self, task_id: int):
        self.task_manager.toggle_task_status(task_id)

    def delete_task(self, task_id: int):
        if self.task_manager.delete_task(task_id):
            self.notifier.success("Success", "Task deleted successfully")

    def activate(self):
        self.refresh_task_list()

    def deactivate(self):
        if self.task_dialog is not None:
            self.task_dialog.reject()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.btn_add.move(self.width() - self.btn_add.width() - 24,
                          self.height() - self.btn_add.height() - 24)
        self.btn_add.raise_()

    def _open_dialog(self, task_id: Optional[int]):
        if self.task_dialog is not None:
            self.task_dialog.reject()
        dialog = TaskDialog(self.task_manager, self.notifier, task_id, self)
        dialog.finished.connect(lambda _result: self._on_dialog_finished(dialog))
        self.task_dialog = dialog
        # non-blocking, pencereye modal
        self.task_dialog.open()

    def _on_dialog_finished(self, dialog: TaskDialog):
        # kapanan dialog parent altında birikmesin
        dialog.deleteLater()
        if dialog is self.task_dialog:
            self.task_dialog = None

    def _empty_state(self, status: TaskStatus) -> QWidget:
        box = QWidget()
        layout = QVBoxLayout(box)
        layout.setAlignment(Qt.AlignCenter)
        layout.setContentsMargins(0, 40, 0, 40)

        icon = QLabel("🗒")
        icon.setAlignment(Qt.AlignCenter)
        icon.setStyleSheet("font-size: 64px;")
        layout.addWidget(icon)

        if status is TaskStatus.OPEN:
            heading, hint = "No tasks yet", "Add your first task to get started!"
        else:
            heading, hint = "No completed tasks", "Complete some tasks to see them here"

        lbl_heading = QLabel(heading)
        lbl_heading.setAlignment(Qt.AlignCenter)
        lbl_heading.setStyleSheet("font-size: 18px; font-weight: 600;")
        layout.addWidget(lbl_heading)

        lbl_hint = QLabel(hint)
        lbl_hint.setObjectName("MutedLabel")
        lbl_hint.setAlignment(Qt.AlignCenter)
        layout.addWidget(lbl_hint)

        if status is TaskStatus.OPEN:
            btn = QPushButton("+  Add Your First Task")
            btn.setObjectName("PrimaryButton")
            btn.setCursor(Qt.PointingHandCursor)
            btn.clicked.connect(self.open_add_dialog)
            layout.addWidget(btn, alignment=Qt.AlignCenter)
        return box

    @staticmethod
    def _clear_layout(layout: QVBoxLayout):
        while layout.count():
            item = layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

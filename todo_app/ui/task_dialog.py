from typing import Optional

from PySide6.QtCore import QDate, Qt
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QDateEdit, QDialog, QFormLayout,
    QHBoxLayout, QLineEdit, QPushButton, QTextEdit, QVBoxLayout
)

from todo_app.core.errors import ValidationError
from todo_app.core.notifier import Notifier
from todo_app.core.task_manager import TaskManager
from todo_app.models.data_models import Priority, TaskForm


class TaskDialog(QDialog):
    """Task ekle / düzenle formu."""

    def __init__(self, task_manager: TaskManager, notifier: Notifier,
                 editing_task_id: Optional[int] = None, parent=None):
        super().__init__(parent)
        self.task_manager = task_manager
        self.notifier = notifier
        self.editing_task_id = editing_task_id

        self.setWindowTitle("Edit Task" if editing_task_id is not None else "Add New Task")
        self.setMinimumWidth(420)
        self.setStyleSheet("background-color: #1e1e2e; color: #cdd6f4;")

        main_layout = QVBoxLayout(self)
        main_layout.setSpacing(15)
        main_layout.setContentsMargins(20, 20, 20, 20)

        form = QFormLayout()
        form.setSpacing(10)

        self.input_title = QLineEdit()
        self.input_title.setPlaceholderText("Enter task title")
        form.addRow("Title *", self.input_title)

        self.input_description = QTextEdit()
        self.input_description.setPlaceholderText("Enter task description (optional)")
        self.input_description.setFixedHeight(80)
        form.addRow("Description", self.input_description)

        # Son tarih: checkbox ile aç/kapa
        due_layout = QHBoxLayout()
        self.chk_has_due_date = QCheckBox("Set due date")
        self.chk_has_due_date.toggled.connect(self.on_due_date_toggled)
        due_layout.addWidget(self.chk_has_due_date)

        self.input_due_date = QDateEdit()
        self.input_due_date.setCalendarPopup(True)
        self.input_due_date.setDisplayFormat("yyyy-MM-dd")
        self.input_due_date.setDate(QDate.currentDate())
        self.input_due_date.setEnabled(False)
        due_layout.addWidget(self.input_due_date)
        form.addRow("Due Date", due_layout)

        self.input_priority = QComboBox()
        for priority in Priority:
            self.input_priority.addItem(priority.value.capitalize(), priority.value)
        self.input_priority.setCurrentIndex(self.input_priority.findData(Priority.MEDIUM.value))
        form.addRow("Priority", self.input_priority)

        main_layout.addLayout(form)

        # Butonlar
        btn_layout = QHBoxLayout()
        self.btn_save = QPushButton("Update" if editing_task_id is not None else "Save")
        self.btn_save.setObjectName("PrimaryButton")
        self.btn_save.setCursor(Qt.PointingHandCursor)
        self.btn_save.clicked.connect(self.save_task)
        btn_layout.addWidget(self.btn_save)

        self.btn_cancel = QPushButton("Cancel")
        self.btn_cancel.setCursor(Qt.PointingHandCursor)
        self.btn_cancel.clicked.connect(self.reject)
        btn_layout.addWidget(self.btn_cancel)
        main_layout.addLayout(btn_layout)

        if editing_task_id is not None:
            existing = self.task_manager.form_for(editing_task_id)
            if existing is not None:
                self.set_form(existing)

    def on_due_date_toggled(self, checked):
        self.input_due_date.setEnabled(checked)

    def set_form(self, form: TaskForm):
        """Formu mevcut değerlerle doldur."""
        self.input_title.setText(form.title)
        self.input_description.setPlainText(form.description or "")
        due_date = form.cleaned_due_date()
        if due_date is not None:
            self.chk_has_due_date.setChecked(True)
            self.input_due_date.setDate(QDate(due_date.year, due_date.month, due_date.day))
        else:
            self.chk_has_due_date.setChecked(False)
        self.input_priority.setCurrentIndex(self.input_priority.findData(form.cleaned_priority().value))

    def form(self) -> TaskForm:
        due_date = None
        if self.chk_has_due_date.isChecked():
            due_date = self.input_due_date.date().toString("yyyy-MM-dd")
        return TaskForm(
            title=self.input_title.text(),
            description=self.input_description.toPlainText(),
            due_date=due_date,
            priority=self.input_priority.currentData(),
        )

    def save_task(self):
        form = self.form()
        try:
            if self.editing_task_id is not None:
                if not form.cleaned_title():
                    raise ValidationError("title", "Task title is required")
                if not self.task_manager.update_task(self.editing_task_id, form):
                    self.notifier.error("Error", "Task no longer exists")
                    self.reject()
                    return
                self.notifier.success("Success", "Task updated successfully")
            else:
                self.task_manager.add_task(form)
                self.notifier.success("Success", "Task added successfully")
        except ValidationError as e:
            self.notifier.error("Error", str(e))
            return
        self.accept()

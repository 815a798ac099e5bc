import logging
from datetime import datetime
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from todo_app.core.errors import ValidationError
from todo_app.models.data_models import Task, TaskForm, TaskStatus

logger = logging.getLogger(__name__)


class TaskManager(QObject):
    """In-memory task koleksiyonu; tüm mutasyonlar buradan geçer."""

    task_created_signal = Signal(int)  # task_id
    task_updated_signal = Signal(int)  # task_id
    task_deleted_signal = Signal(int)  # task_id
    tasks_changed_signal = Signal()

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        super().__init__()
        self._tasks: List[Task] = []
        self._next_id = 1
        self._clock = clock

    def add_task(self, form: TaskForm) -> Task:
        """Yeni task oluştur. Başlık boşsa ValidationError."""
        title = form.cleaned_title()
        if not title:
            raise ValidationError("title", "Task title is required")
        priority = form.cleaned_priority()
        due_date = form.cleaned_due_date()

        now = self._clock()
        task = Task(
            id=self._allocate_id(),
            title=title,
            description=form.cleaned_description(),
            due_date=due_date,
            priority=priority,
            status=TaskStatus.OPEN,
            created_at=now,
            updated_at=now,
        )
        self._tasks.append(task)
        logger.info("Task %d created: %r (%s)", task.id, task.title, task.priority.value)
        self.task_created_signal.emit(task.id)
        self.tasks_changed_signal.emit()
        return task

    def update_task(self, task_id: int, form: TaskForm) -> bool:
        """Task güncelle. Bulunamazsa veya başlık boşsa hiçbir şey yapmaz."""
        task = self.get_task(task_id)
        title = form.cleaned_title()
        if task is None or not title:
            logger.debug("Update ignored for task %s", task_id)
            return False
        priority = form.cleaned_priority()
        due_date = form.cleaned_due_date()

        task.title = title
        task.description = form.cleaned_description()
        task.due_date = due_date
        task.priority = priority
        self._touch(task)
        logger.info("Task %d updated", task.id)
        self.task_updated_signal.emit(task.id)
        self.tasks_changed_signal.emit()
        return True

    def toggle_task_status(self, task_id: int) -> Optional[TaskStatus]:
        """open <-> completed. Yeni durumu döndürür."""
        task = self.get_task(task_id)
        if task is None:
            return None
        task.status = task.status.toggled()
        self._touch(task)
        logger.info("Task %d is now %s", task.id, task.status.value)
        self.task_updated_signal.emit(task.id)
        self.tasks_changed_signal.emit()
        return task.status

    def delete_task(self, task_id: int) -> bool:
        """Task'ı sil."""
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[index]
                logger.info("Task %d deleted", task_id)
                self.task_deleted_signal.emit(task_id)
                self.tasks_changed_signal.emit()
                return True
        return False

    def filter_tasks(self, status: TaskStatus) -> List[Task]:
        """Verilen durumdaki taskları ekleme sırasıyla döndür."""
        status = TaskStatus(status)
        return [task for task in self._tasks if task.status is status]

    def count(self, status: TaskStatus) -> int:
        return len(self.filter_tasks(status))

    def get_all_tasks(self) -> List[Task]:
        return list(self._tasks)

    def get_task(self, task_id: int) -> Optional[Task]:
        return next((task for task in self._tasks if task.id == task_id), None)

    def form_for(self, task_id: int) -> Optional[TaskForm]:
        """Edit dialog'unu doldurmak için task'ın form karşılığı."""
        task = self.get_task(task_id)
        if task is None:
            return None
        return TaskForm(
            title=task.title,
            description=task.description or "",
            due_date=task.due_date,
            priority=task.priority,
        )

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    def _touch(self, task: Task):
        # updated_at never goes backwards, even if the wall clock does
        task.updated_at = max(self._clock(), task.updated_at)

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from todo_app.core.errors import ValidationError


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, Enum):
    OPEN = "open"
    COMPLETED = "completed"

    def toggled(self) -> "TaskStatus":
        return TaskStatus.COMPLETED if self is TaskStatus.OPEN else TaskStatus.OPEN


@dataclass
class Task:
    id: int
    title: str
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.OPEN


@dataclass
class TaskForm:
    """Add/Edit dialog alanları."""
    title: str = ""
    description: Optional[str] = None
    due_date: Union[date, str, None] = None
    priority: Union[Priority, str] = Priority.MEDIUM

    def cleaned_title(self) -> str:
        return (self.title or "").strip()

    def cleaned_description(self) -> Optional[str]:
        if self.description is None or not self.description.strip():
            return None
        return self.description

    def cleaned_priority(self) -> Priority:
        if isinstance(self.priority, Priority):
            return self.priority
        try:
            return Priority(str(self.priority).strip().lower())
        except ValueError:
            raise ValidationError("priority", f"Unknown priority: {self.priority!r}")

    def cleaned_due_date(self) -> Optional[date]:
        return parse_due_date(self.due_date)


@dataclass
class User:
    id: str
    name: str
    email: str
    avatar: Optional[str] = None

    @property
    def initials(self) -> str:
        parts = [p for p in self.name.replace(".", " ").split() if p]
        if not parts:
            return "?"
        return "".join(p[0] for p in parts[:2]).upper()

    @classmethod
    def from_email(cls, email: str) -> "User":
        local = email.split("@", 1)[0] or email
        return cls(id=email.lower(), name=local, email=email)


GUEST_USER = User(id="google-guest", name="John Doe", email="guest@gmail.com")


def parse_due_date(value: Union[date, str, None]) -> Optional[date]:
    """Form'dan gelen tarihi date'e çevir; boşsa None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValidationError("due_date", f"Invalid due date: {text!r} (expected YYYY-MM-DD)")

"""
Application error types.
"""


class TodoAppError(Exception):
    """Base class for all application errors."""


class ValidationError(TodoAppError):
    """A required form field is blank or malformed."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return self.message

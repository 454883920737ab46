"""
Domain errors raised by validation and the session repository.

Every error carries a user-facing ``message`` that the route layer shows as
a flash notification.
"""
from __future__ import annotations


class TodoListError(Exception):
    """Base class for all todo-list domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NameValidationError(TodoListError):
    """A submitted list or todo name was rejected."""


class InvalidLengthError(NameValidationError):
    pass


class DuplicateNameError(NameValidationError):
    pass


class NotFoundError(TodoListError):
    """A list or todo id did not match anything in the session."""


class ListNotFoundError(NotFoundError):
    def __init__(self, list_id: int) -> None:
        super().__init__("The specified list was not found.")
        self.list_id = list_id


class TodoNotFoundError(NotFoundError):
    def __init__(self, list_id: int, todo_id: int) -> None:
        super().__init__("The specified todo was not found.")
        self.list_id = list_id
        self.todo_id = todo_id

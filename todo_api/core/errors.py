"""
Error kinds raised by the task registry.

Each error carries the HTTP status code and the plain-text message the API
answers with, so handlers never have to map them again.
"""
from typing import Optional

from fastapi import status

TASK_NOT_FOUND = "Task not found"
TITLE_REQUIRED = "Title is required"
INVALID_DATA = "Invalid data"
SERVER_ERROR = "Something broke!"


class TodoError(Exception):
    """Base class for registry failures"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = SERVER_ERROR

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(TodoError):
    """Missing or malformed request fields"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = INVALID_DATA


class TodoNotFoundError(TodoError):
    """No task with the requested id"""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = TASK_NOT_FOUND

    def __init__(self, todo_id=None, message: Optional[str] = None):
        self.todo_id = todo_id
        super().__init__(message)

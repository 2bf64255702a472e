"""
Errors raised by the task collection.

Each error carries a ``kind`` and the message echoed back to the client.
"""

MISSING_FIELDS_MESSAGE = "Missing required fields"
EMPTY_FIELD_MESSAGE = "Title and description cannot be empty"
INVALID_TYPE_MESSAGE = "Completed must be a boolean value"
INVALID_PRIORITY_MESSAGE = "Priority must be low, medium, or high"
INVALID_PRIORITY_LEVEL_MESSAGE = "Invalid priority level. Must be low, medium, or high"
TASK_NOT_FOUND_MESSAGE = "Task not found"


class TaskError(Exception):
    """Base error for request-local task failures"""

    kind = "TaskError"
    default_message = "Task request failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class MissingFieldsError(TaskError):
    kind = "MissingFields"
    default_message = MISSING_FIELDS_MESSAGE


class EmptyFieldError(TaskError):
    kind = "EmptyField"
    default_message = EMPTY_FIELD_MESSAGE


class InvalidTypeError(TaskError):
    kind = "InvalidType"
    default_message = INVALID_TYPE_MESSAGE


class InvalidPriorityError(TaskError):
    kind = "InvalidPriority"
    default_message = INVALID_PRIORITY_MESSAGE


class InvalidArgumentError(TaskError):
    kind = "InvalidArgument"
    default_message = INVALID_PRIORITY_LEVEL_MESSAGE


class TaskNotFoundError(TaskError):
    """No task with the requested id"""

    kind = "NotFound"
    default_message = TASK_NOT_FOUND_MESSAGE

    def __init__(self, task_id=None, message: str | None = None):
        self.task_id = task_id
        super().__init__(message)

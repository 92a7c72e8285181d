class TaskError(ValueError):
    """Base class for errors raised by the task domain."""


class ValidationError(TaskError):
    """A task field failed a content check (empty or blank text)."""


class InvalidArgumentError(TaskError):
    """A structural precondition failed, e.g. a task id that is not positive."""

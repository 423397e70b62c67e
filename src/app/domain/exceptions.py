class TaskNotFoundError(Exception):
    """Raised when a task name has neither a native nor a scripted registration."""

    def __init__(self, task_name: str) -> None:
        super().__init__(f"Curation task '{task_name}' is not registered.")
        self.task_name = task_name


class MissingRecorderError(Exception):
    """Raised when a task declares records but no recorder is configured."""

    def __init__(self, task_name: str) -> None:
        super().__init__(f"Missing Recorder: task '{task_name}' declares records.")
        self.task_name = task_name


class TaskInvocationError(Exception):
    """Raised by task implementations when ``init`` or ``perform`` fails."""

    def __init__(self, task_name: str, reason: str) -> None:
        super().__init__(f"Task '{task_name}' failed: {reason}")
        self.task_name = task_name
        self.reason = reason


class TaskLifecycleError(Exception):
    """Raised when a resolved task is driven out of lifecycle order."""

    def __init__(self, task_name: str, operation: str, state: str) -> None:
        super().__init__(
            f"Cannot {operation} task '{task_name}' while it is {state.lower()}."
        )
        self.task_name = task_name
        self.operation = operation
        self.state = state


class ScriptLoadError(Exception):
    """Raised when a scripted task cannot be loaded from its source file."""

    def __init__(self, task_name: str, path: str, reason: str) -> None:
        super().__init__(f"Cannot load scripted task '{task_name}' from {path}: {reason}")
        self.task_name = task_name
        self.path = path

"""Domain-specific exceptions."""


class DomainException(Exception):
    """Base exception for domain errors."""

    exit_code = 1


class UsageError(DomainException):
    """Raised when command-line arguments are missing or invalid."""

    pass


class ToolNotFoundError(DomainException):
    """Raised when a required external executable cannot be found."""

    def __init__(self, tool: str, message: str):
        self.tool = tool
        super().__init__(message)


class SourceDirectoryNotFoundError(DomainException):
    """Raised when a no-build source directory does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The specified source directory does not exist: {path}")


class StepExecutionError(DomainException):
    """Raised when an external workflow step exits with a non-zero status."""

    def __init__(self, step: str, exit_code: int, message: str):
        self.step = step
        self.exit_code = exit_code
        super().__init__(f"{step} failed (exit code {exit_code}): {message}")

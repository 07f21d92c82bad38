"""Application layer exceptions."""

from typing import ClassVar


class ApplicationError(Exception):
    """Base exception for application errors."""

    code: ClassVar[str] = "application_error"


class PasswordToolError(ApplicationError):
    """Base exception for failures running the password tool."""

    code: ClassVar[str] = "password_tool_error"


class ProcessSpawnError(PasswordToolError):
    """Raised when the password tool is missing or cannot be executed."""

    code: ClassVar[str] = "process_spawn_failure"


class ProcessExitError(PasswordToolError):
    """Raised when the password tool ran but exited with a failure status."""

    code: ClassVar[str] = "process_nonzero_exit"

    def __init__(self, returncode: int, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Password tool exited with status {returncode}"
        if stderr:
            msg = f"{msg}: {stderr}"
        super().__init__(msg)


class ToolTimeoutError(PasswordToolError):
    """Raised when the password tool does not finish in time."""

    code: ClassVar[str] = "timeout"


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""

    code: ClassVar[str] = "configuration"

"""Exception taxonomy for engine CLI calls."""

from __future__ import annotations


class EngineClientError(Exception):
    """Base class for every failure raised by the client."""


class ExecutionFailure(EngineClientError):
    """The engine process could not be started or did not finish in time."""


class TimeoutFailure(ExecutionFailure):
    """The process did not exit within the client-wide timeout."""

    def __init__(self, command: str, timeout: float) -> None:
        self.command = command
        self.timeout = timeout
        super().__init__(f"Command timed out after {timeout}s: {command}")


class EngineCommandFailure(EngineClientError):
    """The process ran but exited with a non-zero status."""

    def __init__(self, action: str, subject: str, stderr: str, status: int) -> None:
        self.action = action
        self.subject = subject
        self.stderr = stderr
        self.status = status
        super().__init__(f"Failed to {action} '{subject}'. Error: {stderr}")


class MalformedOutput(EngineClientError):
    """Output of a successful command did not have the expected shape."""

    def __init__(self, message: str, raw: str) -> None:
        self.raw = raw
        super().__init__(f"{message}: {raw!r}")

"""Container engine CLI client."""

from enginecli.args import MASK_PLACEHOLDER, ArgumentList
from enginecli.client import EngineClient
from enginecli.containment import ContainmentDetector, ProbeCommands
from enginecli.errors import (
    EngineClientError,
    EngineCommandFailure,
    ExecutionFailure,
    MalformedOutput,
    TimeoutFailure,
)
from enginecli.executor import Executor
from enginecli.paths import identity_path, translator_for, windows_path
from enginecli.runner import ProcessHandle, ProcessRunner, SubprocessRunner
from enginecli.types import ContainmentResult, LaunchResult, RunRequest

__all__ = [
    "MASK_PLACEHOLDER",
    "ArgumentList",
    "ContainmentDetector",
    "ContainmentResult",
    "EngineClient",
    "EngineClientError",
    "EngineCommandFailure",
    "ExecutionFailure",
    "Executor",
    "LaunchResult",
    "MalformedOutput",
    "ProbeCommands",
    "ProcessHandle",
    "ProcessRunner",
    "RunRequest",
    "SubprocessRunner",
    "TimeoutFailure",
    "identity_path",
    "translator_for",
    "windows_path",
]

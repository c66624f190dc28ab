"""Shared test fixtures for enginecli."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import pytest
import structlog
from structlog.testing import capture_logs

from enginecli.executor import Executor

# ---------------------------------------------------------------------------
# Shared helpers (plain functions/classes, not fixtures, importable by test files)
# ---------------------------------------------------------------------------


def make_settings(**overrides):
    """Create a Settings object with defaults, ignoring files and environment.

    Usage::

        s = make_settings(engine=EngineConfig(platform="windows"))
    """
    from enginecli.config import EngineConfig, LoggingConfig, ProbeConfig, Settings

    defaults = {
        "engine": EngineConfig(),
        "probes": ProbeConfig(),
        "logging": LoggingConfig(),
    }
    defaults.update(overrides)
    return Settings.model_construct(**defaults)


@dataclass
class Call:
    argv: list[str]
    env: dict[str, str]
    workdir: Path | None


class _Handle:
    def __init__(self, outcome, stdout: BinaryIO, stderr: BinaryIO) -> None:
        self._outcome = outcome
        self._stdout = stdout
        self._stderr = stderr

    def join_with_timeout(self, timeout: float) -> int:
        if isinstance(self._outcome, BaseException):
            raise self._outcome
        status, out, err = self._outcome
        self._stdout.write(out.encode())
        self._stderr.write(err.encode())
        return status


class FakeRunner:
    """Scripted ProcessRunner.

    Each outcome is either ``(status, stdout, stderr)``, an exception raised
    at join time, or ``("start", exc)`` to fail at start.
    """

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[Call] = []

    def start(
        self,
        argv: Sequence[str],
        env: Mapping[str, str],
        workdir: Path | None,
        stdout: BinaryIO,
        stderr: BinaryIO,
    ) -> _Handle:
        self.calls.append(Call(list(argv), dict(env), workdir))
        if not self.outcomes:
            raise AssertionError(f"Unexpected command: {list(argv)}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, tuple) and outcome[0] == "start":
            raise outcome[1]
        return _Handle(outcome, stdout, stderr)


def make_executor(runner: FakeRunner, timeout: float = 5.0) -> Executor:
    return Executor(runner, log=structlog.get_logger("test"), timeout=timeout)


@pytest.fixture
def log_output():
    """Capture structlog events emitted during the test."""
    with capture_logs() as logs:
        yield logs

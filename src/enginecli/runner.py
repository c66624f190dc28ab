"""Process launching seam.

:class:`ProcessRunner` is the contract the executor consumes; anything that
can start a process and join it with a timeout fits.  :class:`SubprocessRunner`
is the default implementation on top of :mod:`subprocess`.
"""

from __future__ import annotations

import contextlib
import os
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class ProcessHandle(Protocol):
    def join_with_timeout(self, timeout: float) -> int:
        """Wait for exit and return the exit code; raise ``TimeoutError`` on timeout."""
        ...


@runtime_checkable
class ProcessRunner(Protocol):
    def start(
        self,
        argv: Sequence[str],
        env: Mapping[str, str],
        workdir: Path | None,
        stdout: BinaryIO,
        stderr: BinaryIO,
    ) -> ProcessHandle:
        """Start *argv*; raise ``OSError`` if the process cannot be created."""
        ...


class _PopenHandle:
    def __init__(self, proc: subprocess.Popen[bytes], stdout: BinaryIO, stderr: BinaryIO) -> None:
        self._proc = proc
        self._stdout = stdout
        self._stderr = stderr

    def join_with_timeout(self, timeout: float) -> int:
        try:
            out, err = self._proc.communicate(timeout=timeout)
        except subprocess.TimeoutExpired as exc:
            self._proc.kill()
            with contextlib.suppress(subprocess.TimeoutExpired):
                self._proc.communicate(timeout=5)
            raise TimeoutError(f"Process did not exit within {timeout}s") from exc
        self._stdout.write(out or b"")
        self._stderr.write(err or b"")
        return self._proc.returncode


class SubprocessRunner:
    """Runs commands without a shell, overlaying *env* on the inherited environment."""

    def start(
        self,
        argv: Sequence[str],
        env: Mapping[str, str],
        workdir: Path | None,
        stdout: BinaryIO,
        stderr: BinaryIO,
    ) -> ProcessHandle:
        merged_env = os.environ.copy()
        merged_env.update(env)
        proc = subprocess.Popen(
            list(argv),
            cwd=str(workdir) if workdir is not None else None,
            env=merged_env,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        return _PopenHandle(proc, stdout, stderr)

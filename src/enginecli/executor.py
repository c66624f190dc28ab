"""Blocking execution of an assembled engine command.

Every call starts one process through the injected :class:`ProcessRunner`,
joins it with the client-wide timeout and returns a :class:`LaunchResult`.
A process that starts and exits non-zero is a normal result; only start
failures and timeouts raise.
"""

from __future__ import annotations

import io
import locale
from collections.abc import Mapping, Sequence
from pathlib import Path

import structlog

from enginecli.args import ArgumentList
from enginecli.errors import ExecutionFailure, TimeoutFailure
from enginecli.runner import ProcessRunner
from enginecli.types import LaunchResult

DEFAULT_TIMEOUT = 180.0  # seconds


class Executor:
    def __init__(
        self,
        runner: ProcessRunner,
        *,
        log: structlog.stdlib.BoundLogger,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.runner = runner
        self.log = log
        self.timeout = timeout

    def execute(
        self,
        env: Mapping[str, str],
        quiet: bool,
        workdir: Path | None,
        argv: ArgumentList | Sequence[str],
    ) -> LaunchResult:
        """Run *argv* and capture its output.

        Args:
            env: Variables overlaid on the inherited environment.
            quiet: Suppress the command echo (for noisy internal probes).
            workdir: Working directory for the process, or None to inherit.
            argv: Assembled command; masked tokens are redacted in logs only.

        Raises:
            ExecutionFailure: The process could not be started.
            TimeoutFailure: The process did not exit within the timeout.
        """
        args = argv if isinstance(argv, ArgumentList) else ArgumentList(*argv)
        rendered = args.render()
        if not quiet:
            self.log.debug("Executing command", command=rendered)

        out = io.BytesIO()
        err = io.BytesIO()
        try:
            handle = self.runner.start(args.to_list(), dict(env), workdir, out, err)
            status = handle.join_with_timeout(self.timeout)
        except TimeoutError as exc:
            raise TimeoutFailure(rendered, self.timeout) from exc
        except (OSError, ValueError) as exc:
            raise ExecutionFailure(f"Failed to start '{rendered}': {exc}") from exc

        encoding = locale.getpreferredencoding(False)
        result = LaunchResult(
            status=status,
            stdout=out.getvalue().decode(encoding, errors="replace"),
            stderr=err.getvalue().decode(encoding, errors="replace"),
        )
        if not quiet:
            self.log.debug(
                "Command finished",
                command=rendered,
                status=result.status,
                stderr=result.stderr[-2000:],
            )
        return result

"""Parsers for engine CLI text output."""

from __future__ import annotations

from enginecli.errors import ExecutionFailure, MalformedOutput
from enginecli.types import LaunchResult

# Header labels of the command-name column: Linux ``ps`` uses CMD/COMMAND,
# Windows containers report ``Name`` first.
_COMMAND_COLUMNS = ("CMD", "COMMAND", "Name")


def _command_column(header: str) -> int:
    columns = header.split()
    for label in _COMMAND_COLUMNS:
        if label in columns:
            return columns.index(label)
    return 0


def parse_process_list(stdout: str) -> list[str]:
    """Extract command names from ``top`` output.

    The first line is the ``ps`` header and is dropped after locating the
    command column in it.  Each remaining non-empty line contributes the
    token in that column (the first token when the header names none).
    """
    lines = stdout.splitlines()
    if not lines:
        raise MalformedOutput("Unexpected `top` output, missing header", stdout)

    column = _command_column(lines[0])
    processes: list[str] = []
    for line in lines[1:]:
        if not line:
            continue
        tokens = line.split()
        if len(tokens) <= column:
            raise MalformedOutput("Unexpected `top` output", line)
        processes.append(tokens[column])
    return processes


def parse_identifier(result: LaunchResult) -> str:
    if not result.success:
        raise ExecutionFailure(
            f"Identifier lookup exited with status {result.status}: {result.stderr.strip()}"
        )
    return result.stdout.strip()

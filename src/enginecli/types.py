"""Data models for enginecli."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LaunchResult:
    """Outcome of one engine process: exit status plus decoded output."""

    status: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.status == 0


@dataclass
class RunRequest:
    image: str
    command: Sequence[str] = ()
    extra_args: str | None = None  # Raw tokens, shell-split verbatim
    workdir: str | None = None
    volumes: Mapping[str, str] = field(default_factory=dict)  # host path -> container path
    volumes_from: Collection[str] = field(default_factory=list)
    # Values are secret; kept out of repr so requests can be logged safely.
    container_env: Mapping[str, str] = field(default_factory=dict, repr=False)
    user: str = ""  # Carried for callers; not emitted on the command line


@dataclass(frozen=True)
class ContainmentResult:
    """Best-effort answer to "is this host itself a container?"."""

    container_id: str | None = None

    @property
    def present(self) -> bool:
        return self.container_id is not None

    @classmethod
    def absent(cls) -> ContainmentResult:
        return cls()

    @classmethod
    def of(cls, container_id: str) -> ContainmentResult:
        return cls(container_id=container_id)

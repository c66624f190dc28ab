"""Engine CLI argument construction.

:class:`ArgumentList` keeps a mask flag next to every token so secrets can be
passed to the process in full while diagnostics only ever see a placeholder.
The ``build_*`` helpers assemble the argument list for each engine operation.
"""

from __future__ import annotations

import shlex
from collections.abc import Iterable, Sequence

from enginecli.paths import PathTranslator, identity_path
from enginecli.types import RunRequest

MASK_PLACEHOLDER = "******"


class ArgumentList:
    """Ordered command tokens, some of which are masked in renderings."""

    def __init__(self, *tokens: str) -> None:
        self._tokens: list[str] = []
        self._masked: list[bool] = []
        self.add(*tokens)

    def add(self, *tokens: str) -> ArgumentList:
        for token in tokens:
            self._tokens.append(token)
            self._masked.append(False)
        return self

    def add_masked(self, token: str) -> ArgumentList:
        self._tokens.append(token)
        self._masked.append(True)
        return self

    def add_tokenized(self, text: str) -> ArgumentList:
        """Append shell-style words from *text* as-is (no escaping, no masking)."""
        return self.add(*shlex.split(text))

    def extend(self, tokens: Iterable[str]) -> ArgumentList:
        return self.add(*tokens)

    def to_list(self) -> list[str]:
        return list(self._tokens)

    def masked_values(self) -> list[str]:
        return [t for t, m in zip(self._tokens, self._masked) if m]

    def render(self) -> str:
        """Space-joined command line with every masked token replaced."""
        return " ".join(
            MASK_PLACEHOLDER if masked else token
            for token, masked in zip(self._tokens, self._masked)
        )

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ArgumentList({self.render()!r})"


def build_run_args(
    cli: str, request: RunRequest, translate: PathTranslator = identity_path
) -> ArgumentList:
    """``<cli> run -d -t ... <image> [command...]`` for a detached container."""
    argb = ArgumentList(cli, "run", "-d", "-t")
    if request.extra_args is not None:
        argb.add_tokenized(request.extra_args)

    if request.workdir is not None:
        argb.add("-w", translate(request.workdir))
    for host_path, container_path in request.volumes.items():
        argb.add("-v", f"{translate(host_path)}:{translate(container_path)}")
    for container_id in request.volumes_from:
        argb.add("--volumes-from", container_id)
    for name, value in request.container_env.items():
        argb.add("-e")
        argb.add_masked(f"{name}={value}")

    argb.add(request.image)
    argb.extend(request.command)
    return argb


def build_top_args(cli: str, container_id: str) -> ArgumentList:
    return ArgumentList(cli, "top", container_id)


def build_inspect_id_args(cli: str, short_id: str) -> list[str]:
    return [cli, "inspect", short_id, "--format={{.Id}}"]


def build_probe_args(argv: Sequence[str], translate: PathTranslator = identity_path) -> ArgumentList:
    """Internal probe command with every token run through the translator."""
    return ArgumentList(*(translate(token) for token in argv))

"""Detect whether the current host is itself an engine-managed container.

The protocol is best effort and runs at most three commands, each once:

1. query a service that only exists inside containers; failure -> absent
2. resolve the host name; failure -> :class:`ExecutionFailure`
3. ask the engine for the long id of that name; failure -> absent
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from enginecli.args import build_inspect_id_args, build_probe_args
from enginecli.errors import ExecutionFailure
from enginecli.executor import Executor
from enginecli.parsing import parse_identifier
from enginecli.paths import PathTranslator, identity_path
from enginecli.types import ContainmentResult, LaunchResult


@dataclass(frozen=True)
class ProbeCommands:
    service_query: Sequence[str] = ("sc.exe", "query", "cexecsvc")
    hostname: Sequence[str] = ("hostname",)
    whoami: Sequence[str] = ("whoami",)


class ContainmentDetector:
    def __init__(
        self,
        executor: Executor,
        *,
        cli: str = "docker",
        translate: PathTranslator = identity_path,
        probes: ProbeCommands | None = None,
    ) -> None:
        self.executor = executor
        self.cli = cli
        self.translate = translate
        self.probes = probes or ProbeCommands()

    def _probe(self, argv: Sequence[str]) -> LaunchResult:
        return self.executor.execute({}, True, None, build_probe_args(argv, self.translate))

    def detect(self) -> ContainmentResult:
        try:
            service = self._probe(self.probes.service_query)
        except ExecutionFailure as exc:
            self.executor.log.debug("Container service probe failed", error=str(exc))
            return ContainmentResult.absent()
        if not service.success:
            return ContainmentResult.absent()

        try:
            hostname = self._probe(self.probes.hostname)
        except ExecutionFailure as exc:
            raise ExecutionFailure("failed to resolve host identity") from exc
        if not hostname.success:
            raise ExecutionFailure("failed to resolve host identity")

        short_id = hostname.stdout.strip().lower()
        lookup = self._probe(build_inspect_id_args(self.cli, short_id))
        if not lookup.success:
            self.executor.log.info(
                "Running inside of a container but cannot determine container ID "
                "from current environment",
                short_id=short_id,
            )
            return ContainmentResult.absent()

        return ContainmentResult.of(parse_identifier(lookup))

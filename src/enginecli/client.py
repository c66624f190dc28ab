"""Engine client facade.

One :class:`EngineClient` serves every host platform; the only behavior that
varies by platform, path syntax, is injected as a translator.
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping

from enginecli.args import build_run_args, build_top_args
from enginecli.config import Settings
from enginecli.containment import ContainmentDetector, ProbeCommands
from enginecli.errors import EngineCommandFailure
from enginecli.executor import Executor
from enginecli.logger import get_logger
from enginecli.parsing import parse_process_list
from enginecli.paths import PathTranslator, identity_path, translator_for
from enginecli.runner import ProcessRunner, SubprocessRunner
from enginecli.types import ContainmentResult, RunRequest


class EngineClient:
    """Issues one-shot engine CLI commands and returns typed results.

    Example:
        >>> client = EngineClient.from_settings(get_settings())
        >>> container_id = client.run(RunRequest(image="alpine", command=["cat"]))
        >>> client.list_processes(container_id.strip())
        ['cat']
    """

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
        self._detector = ContainmentDetector(
            executor, cli=cli, translate=translate, probes=self.probes
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, runner: ProcessRunner | None = None
    ) -> EngineClient:
        executor = Executor(
            runner or SubprocessRunner(),
            log=get_logger("enginecli.executor"),
            timeout=settings.engine.timeout,
        )
        return cls(
            executor,
            cli=settings.engine.cli,
            translate=translator_for(settings.engine.platform),
            probes=ProbeCommands(
                service_query=tuple(settings.probes.service_query),
                hostname=tuple(settings.probes.hostname),
                whoami=tuple(settings.probes.whoami),
            ),
        )

    def run(self, request: RunRequest, launch_env: Mapping[str, str] | None = None) -> str:
        """Start a detached container and return the engine's stdout (the new id)."""
        argb = build_run_args(self.cli, request, self.translate)
        result = self.executor.execute(launch_env or {}, False, None, argb)
        if not result.success:
            raise EngineCommandFailure("run image", request.image, result.stderr, result.status)
        return result.stdout

    def list_processes(
        self, container_id: str, launch_env: Mapping[str, str] | None = None
    ) -> list[str]:
        result = self.executor.execute(
            launch_env or {}, False, None, build_top_args(self.cli, container_id)
        )
        if not result.success:
            raise EngineCommandFailure("run top", container_id, result.stderr, result.status)
        return parse_process_list(result.stdout)

    def get_container_id_if_containerized(self) -> ContainmentResult:
        return self._detector.detect()

    def who_am_i(self) -> str:
        """Name of the user the engine commands run as.

        Raises:
            subprocess.CalledProcessError: The identity command exited non-zero.
        """
        argv = list(self.probes.whoami)
        result = self.executor.execute({}, True, None, argv)
        if not result.success:
            raise subprocess.CalledProcessError(
                result.status, argv, output=result.stdout, stderr=result.stderr
            )
        return result.stdout.strip()

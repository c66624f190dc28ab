"""Tests for the command-line entry point."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from enginecli.__main__ import main
from enginecli.errors import EngineCommandFailure
from enginecli.types import ContainmentResult


@pytest.fixture
def client():
    mock = MagicMock()
    with (
        patch("enginecli.config.get_settings"),
        patch("enginecli.logger.configure_logging"),
        patch("enginecli.client.EngineClient.from_settings", return_value=mock),
    ):
        yield mock


class TestMain:
    def test_run_builds_request(self, client, capsys):
        client.run.return_value = "abc123\n"
        code = main(
            [
                "run",
                "-w", "C:/ws",
                "-v", "C:/ws:/ws",
                "-e", "TOKEN=a=b",
                "--volumes-from", "other",
                "--args=--rm",
                "alpine", "sleep", "10",
            ]
        )  # fmt: skip
        assert code == 0
        assert capsys.readouterr().out == "abc123\n"
        request = client.run.call_args.args[0]
        assert request.image == "alpine"
        assert request.command == ["sleep", "10"]
        assert request.workdir == "C:/ws"
        assert request.volumes == {"C:/ws": "/ws"}
        assert request.container_env == {"TOKEN": "a=b"}
        assert request.volumes_from == ["other"]
        assert request.extra_args == "--rm"

    def test_top(self, client, capsys):
        client.list_processes.return_value = ["bash", "sleep"]
        assert main(["top", "abc"]) == 0
        assert capsys.readouterr().out == "bash\nsleep\n"

    def test_whoami(self, client, capsys):
        client.who_am_i.return_value = "jenkins"
        assert main(["whoami"]) == 0
        assert capsys.readouterr().out == "jenkins\n"

    def test_containerized_present(self, client, capsys):
        client.get_container_id_if_containerized.return_value = ContainmentResult.of("long")
        assert main(["containerized"]) == 0
        assert capsys.readouterr().out == "long\n"

    def test_containerized_absent(self, client):
        client.get_container_id_if_containerized.return_value = ContainmentResult.absent()
        assert main(["containerized"]) == 1

    def test_engine_failure_exit_code(self, client, capsys):
        client.list_processes.side_effect = EngineCommandFailure("run top", "abc", "gone", 1)
        assert main(["top", "abc"]) == 1
        assert "Failed to run top 'abc'" in capsys.readouterr().err

    def test_bad_env_pair(self, client):
        with pytest.raises(SystemExit):
            main(["run", "-e", "NOVALUE", "alpine"])

    def test_whoami_failure_exit_code(self, client, capsys):
        client.who_am_i.side_effect = subprocess.CalledProcessError(
            1, ["whoami"], stderr="denied"
        )
        assert main(["whoami"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_options_after_image_go_to_command(self, client):
        client.run.return_value = "id\n"
        main(["run", "alpine", "-e", "A=b"])
        request = client.run.call_args.args[0]
        assert request.command == ["-e", "A=b"]
        assert request.container_env == {}

    def test_volume_splits_on_last_colon(self, client):
        client.run.return_value = "id\n"
        main(["run", "-v", "C:/a:/b", "alpine"])
        assert client.run.call_args.args[0].volumes == {"C:/a": "/b"}

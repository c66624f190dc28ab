"""Entry point for `python -m enginecli` / `enginecli`.

Subcommands:
    enginecli run IMAGE [CMD...]    Start a detached container, print its id
    enginecli top CONTAINER         List process names in a container
    enginecli whoami                Print the current user
    enginecli containerized         Print this host's container id, exit 1 if none
"""

from __future__ import annotations

import argparse
import subprocess
import sys

from enginecli.errors import EngineClientError
from enginecli.types import RunRequest


def _volume(value: str) -> tuple[str, str]:
    # Split on the last colon so Windows drive letters in the host path survive.
    host, found, container = value.rpartition(":")
    if not found or not host or not container:
        raise argparse.ArgumentTypeError(f"expected HOST:CONTAINER, got {value!r}")
    return host, container


def _env_pair(value: str) -> tuple[str, str]:
    name, found, rest = value.partition("=")
    if not found or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name, rest


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enginecli",
        description="Drive a container engine through its command line",
    )
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser(
        "run",
        help="Start a detached container",
        description="Start a detached container. Options must come before IMAGE; "
        "everything after IMAGE is passed to the container as its command.",
    )
    run.add_argument("image")
    run.add_argument(
        "cmd", nargs=argparse.REMAINDER, help="Container command; options after IMAGE land here"
    )
    run.add_argument("--args", dest="extra_args", default=None, help="Extra engine arguments")
    run.add_argument("-w", "--workdir", default=None)
    run.add_argument(
        "-v",
        "--volume",
        action="append",
        default=[],
        type=_volume,
        metavar="HOST:CONTAINER",
        help="Bind mount; splits on the last colon, so CONTAINER must not contain a colon",
    )
    run.add_argument("--volumes-from", action="append", default=[], metavar="CONTAINER")
    run.add_argument(
        "-e", "--env", action="append", default=[], type=_env_pair, metavar="NAME=VALUE"
    )
    run.add_argument("--user", default="")

    top = sub.add_parser("top", help="List process names in a container")
    top.add_argument("container")

    sub.add_parser("whoami", help="Print the current user")
    sub.add_parser("containerized", help="Print this host's container id")
    return parser


def _run(client, args: argparse.Namespace) -> int:
    request = RunRequest(
        image=args.image,
        command=args.cmd,
        extra_args=args.extra_args,
        workdir=args.workdir,
        volumes=dict(args.volume),
        volumes_from=args.volumes_from,
        container_env=dict(args.env),
        user=args.user,
    )
    print(client.run(request).strip())
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    from enginecli.client import EngineClient
    from enginecli.config import get_settings
    from enginecli.logger import configure_logging

    settings = get_settings()
    configure_logging(args.log_level or settings.logging.level)
    client = EngineClient.from_settings(settings)

    try:
        match args.command:
            case "run":
                return _run(client, args)
            case "top":
                for name in client.list_processes(args.container):
                    print(name)
                return 0
            case "whoami":
                print(client.who_am_i())
                return 0
            case "containerized":
                result = client.get_container_id_if_containerized()
                if not result.present:
                    return 1
                print(result.container_id)
                return 0
    except (EngineClientError, subprocess.CalledProcessError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 2


if __name__ == "__main__":
    sys.exit(main())

"""envctl: inspect and set process environment variables from the shell.

Usage:
    envctl get KEY
    envctl set KEY VALUE [-- COMMAND ...]

``get`` prints the lookup result as JSON and exits 1 when the variable is
absent. ``set`` updates the environment of this process; when a command
follows ``--`` it is run as a child process that inherits the new value.
KEY and VALUE are taken literally, dashes included. Only a ``--`` right after
VALUE starts the child command.

Exit codes:
    0: success (or the child command's own code when one is run)
    1: variable not set (``get``)
    2: usage error
    3: host rejected the variable (``set``)
    4: unexpected failure, including logging setup
    127: child command not found

Environment Variables:
    ENVACCESS_LOG_LEVEL: Console log level (optional, default: INFO)
    ENVACCESS_LOG_FILE: Rotating debug log file (optional)

Both may also be placed in a ``.env`` file in the working directory. The file
is only consulted for these settings and is never loaded into the environment.
"""
from __future__ import annotations

import argparse
import subprocess
import sys

from dotenv import dotenv_values, find_dotenv
from loguru import logger

from .config.logger import configure_logging
from .schemas.result import OkResult
from .utils.env import get_env, set_env

EXIT_OK = 0
EXIT_NOT_FOUND = 1
# 2 is argparse usage errors
EXIT_REJECTED = 3
EXIT_FAILURE = 4
EXIT_COMMAND_NOT_FOUND = 127


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envctl",
        description="Read and write process environment variables.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="Print a variable as a tagged JSON result")
    get_parser.add_argument("key")

    set_parser = subparsers.add_parser("set", help="Set a variable, optionally running a command with it")
    set_parser.add_argument("key")
    set_parser.add_argument("value")

    return parser


def parse_arguments(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    """Parse envctl arguments and separate any child command.

    For ``set KEY VALUE [-- COMMAND ...]`` the key and value are taken
    literally, so values such as ``-x`` or ``--`` need no quoting. Only a
    ``--`` right after VALUE starts the child command.
    """
    parser = build_parser()
    if len(argv) >= 3 and argv[0] == "set":
        rest = argv[3:]
        if rest and rest[0] != "--":
            parser.error(f"unrecognized arguments: {' '.join(rest)}")
        return argparse.Namespace(command="set", key=argv[1], value=argv[2]), rest[1:]
    return parser.parse_args(argv), []


def cmd_get(key: str) -> int:
    result = get_env(key)
    print(result.model_dump_json())
    return EXIT_OK if isinstance(result, OkResult) else EXIT_NOT_FOUND


def cmd_set(key: str, value: str, child_command: list[str]) -> int:
    try:
        set_env(key, value)
    except (ValueError, OSError) as e:
        logger.error(f"Host rejected environment variable {key!r}: {e}")
        return EXIT_REJECTED

    if not child_command:
        print("true")
        return EXIT_OK

    logger.info(f"Running {child_command[0]} with {key} set")
    try:
        completed = subprocess.run(child_command)
    except FileNotFoundError:
        logger.error(f"Command not found: {child_command[0]}")
        return EXIT_COMMAND_NOT_FOUND
    logger.debug(f"{child_command[0]} exited with {completed.returncode}")
    return completed.returncode


def setup_logging() -> None:
    """Configure logging from the environment, falling back to a local .env."""
    dotenv_path = find_dotenv(usecwd=True)
    settings = dotenv_values(dotenv_path) if dotenv_path else {}
    configure_logging(
        level=settings.get("ENVACCESS_LOG_LEVEL"),
        log_file=settings.get("ENVACCESS_LOG_FILE"),
    )


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``envctl`` console script."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        setup_logging()
    except Exception as e:
        # Sinks may be half-configured; report on the default one
        logger.remove()
        logger.add(sys.stderr)
        logger.enable("envaccess")
        logger.error(f"Could not configure logging: {e}")
        return EXIT_FAILURE

    args, child_command = parse_arguments(argv)

    try:
        if args.command == "get":
            return cmd_get(args.key)
        return cmd_set(args.key, args.value, child_command)
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return EXIT_FAILURE
    except Exception as e:
        logger.error(f"envctl failed: {e}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())

# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

One invocation runs exactly one command:
settings -> logging -> TaskStore -> command -> exit code.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .. import __version__
from ..config import Settings, describe_env_vars, get_settings
from ..errors import IOFailure, TodoError
from ..logging_setup import parse_level, setup_logging
from ..tasks.task_store import TaskStore
from .commands import CommandRegistry, registry as command_registry

logger = logging.getLogger(__name__)


def build_parser(registry: CommandRegistry = command_registry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-tracker",
        description="A simple CLI to-do list application.",
        epilog=describe_env_vars(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--store", metavar="PATH", help="Task file to use instead of the configured one")
    parser.add_argument("--log-level", metavar="LEVEL", help="Console log level (DEBUG, INFO, WARNING, ...)")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for cmd in registry.commands():
        p = sub.add_parser(cmd.name, help=cmd.help_text, description=cmd.help_text, aliases=cmd.aliases)
        if cmd.configure is not None:
            cmd.configure(p)
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    changes: dict[str, object] = {}
    if args.store:
        changes["store_path"] = Path(args.store).expanduser()
    if args.log_level:
        changes["log_level"] = args.log_level.upper()
    return dataclasses.replace(settings, **changes) if changes else settings


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if settings is None:
        settings = get_settings()
    settings = _apply_overrides(settings, args)

    try:
        setup_logging(console_level=parse_level(settings.log_level), log_file=settings.log_file)
    except OSError as e:
        err = IOFailure(f"Cannot open log file {settings.log_file}: {e}")
        print(f"Error: {err}", file=sys.stderr)
        return err.exit_code
    logger.debug("Running command=%s store=%s", args.command, settings.store_path)

    store = TaskStore(settings.store_path)
    try:
        output = command_registry.handle(store, args.command, args)
    except TodoError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    print(output)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()

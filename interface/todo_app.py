"""
todo: single-user task list over a JSON file.

Thin facade: builds the parser, wires dependencies and dispatches to
cli_commands. The same manager backs the HTTP API started by ``todo serve``.
"""

import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError
from typing import List, Optional

from application.todo_manager import TodoManager
from core import TodoError
from interface import cli_commands
from interface.cli_commands import CliDeps
from interface.cli_io import structured_error
from interface.cli_parser import build_parser as build_cli_parser
from interface.constants import FALLBACK_VERSION
from interface.i18n import translate
from interface.serializers import todo_to_dict

CLI_DEPS = CliDeps(
    manager_factory=lambda data_file: TodoManager(data_file=data_file),
    translate=translate,
    todo_to_dict=todo_to_dict,
)


def build_parser():
    """Build CLI argument parser."""
    return build_cli_parser(commands=cli_commands, translate=translate)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None, deps: CliDeps = CLI_DEPS) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("todo-json"))
        except PackageNotFoundError:
            print(FALLBACK_VERSION)
        return 0
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    _configure_logging(getattr(args, "verbose", False))
    try:
        return args.func(args, deps)
    except TodoError as exc:
        message = deps.translate("STORE_ERROR", error=exc)
        if getattr(args, "json", False):
            return structured_error(args.command, message)
        print(message, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

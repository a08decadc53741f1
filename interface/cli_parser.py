"""CLI parser construction for the todo CLI."""

import argparse
from typing import Any, Callable

from interface.constants import PROGRAM_DESCRIPTION, PROGRAM_NAME


def build_parser(commands: Any, translate: Callable[..., str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROGRAM_NAME, description=PROGRAM_DESCRIPTION)
    parser.add_argument("--file", "-f", help="path to the todos JSON file (default: ./todos.json)")
    parser.add_argument("--json", action="store_true", help="structured JSON output")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging to stderr")
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    sub = parser.add_subparsers(dest="command")

    ap = sub.add_parser("add", help=translate("HELP_ADD"))
    ap.add_argument("text")
    ap.set_defaults(func=commands.cmd_add)

    lp = sub.add_parser("list", aliases=["ls"], help=translate("HELP_LIST"))
    # --all is the default; --pending wins when both are given
    lp.add_argument("--all", "-a", action="store_true", help=translate("HELP_ALL"))
    lp.add_argument("--pending", "-p", action="store_true", help=translate("HELP_PENDING"))
    lp.set_defaults(func=commands.cmd_list)

    dp = sub.add_parser("done", aliases=["complete"], help=translate("HELP_DONE"))
    dp.add_argument("id")
    dp.set_defaults(func=commands.cmd_done)

    up = sub.add_parser("undone", aliases=["uncomplete"], help=translate("HELP_UNDONE"))
    up.add_argument("id")
    up.set_defaults(func=commands.cmd_undone)

    rp = sub.add_parser("delete", aliases=["rm"], help=translate("HELP_DELETE"))
    rp.add_argument("id")
    rp.set_defaults(func=commands.cmd_delete)

    cp = sub.add_parser("clear", help=translate("HELP_CLEAR"))
    cp.set_defaults(func=commands.cmd_clear)

    sp = sub.add_parser("serve", help=translate("HELP_SERVE"))
    sp.add_argument("--host")
    sp.add_argument("--port", type=int)
    sp.set_defaults(func=commands.cmd_serve)

    return parser

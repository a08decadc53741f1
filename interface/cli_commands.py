import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from core import Todo, format_todo, parse_todo_id
from interface.cli_io import structured_error, structured_response

logger = logging.getLogger("todo.cli")

TodoManagerFactory = Callable[[Optional[str]], Any]
Translate = Callable[..., str]


@dataclass
class CliDeps:
    manager_factory: TodoManagerFactory
    translate: Translate
    todo_to_dict: Callable[[Todo], Dict[str, Any]]


def _manager(args: argparse.Namespace, deps: CliDeps):
    return deps.manager_factory(getattr(args, "file", None))


def _json_mode(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "json", False))


def _not_found(command: str, raw_id: str, args: argparse.Namespace, deps: CliDeps) -> int:
    message = deps.translate("NOT_FOUND", id=raw_id)
    if _json_mode(args):
        return structured_error(command, message, payload={"id": raw_id})
    print(message, file=sys.stderr)
    return 1


def _report_todo(command: str, key: str, todo: Todo, args: argparse.Namespace, deps: CliDeps) -> int:
    message = deps.translate(key, todo=format_todo(todo))
    if _json_mode(args):
        return structured_response(command, message=message, payload={"todo": deps.todo_to_dict(todo)})
    print(message)
    return 0


def cmd_add(args: argparse.Namespace, deps: CliDeps) -> int:
    todo = _manager(args, deps).add(args.text)
    return _report_todo("add", "ADDED", todo, args, deps)


def cmd_list(args: argparse.Namespace, deps: CliDeps) -> int:
    show_all = not getattr(args, "pending", False)
    todos = _manager(args, deps).list(show_all)
    if _json_mode(args):
        return structured_response(
            "list",
            message=deps.translate("LIST_SUMMARY", count=len(todos)),
            payload={"todos": [deps.todo_to_dict(t) for t in todos], "show_all": show_all},
        )
    if not todos:
        print(deps.translate("LIST_EMPTY"))
        return 0
    print("\n" + deps.translate("LIST_HEADER"))
    print("----------")
    for todo in todos:
        print(format_todo(todo))
    print("")
    return 0


def _targeted(command: str, key: str, operation: str, args: argparse.Namespace, deps: CliDeps) -> int:
    todo_id = parse_todo_id(args.id)
    todo = None
    if todo_id is not None:
        todo = getattr(_manager(args, deps), operation)(todo_id)
    if todo is None:
        return _not_found(command, args.id, args, deps)
    return _report_todo(command, key, todo, args, deps)


def cmd_done(args: argparse.Namespace, deps: CliDeps) -> int:
    return _targeted("done", "COMPLETED", "complete", args, deps)


def cmd_undone(args: argparse.Namespace, deps: CliDeps) -> int:
    return _targeted("undone", "UNCOMPLETED", "uncomplete", args, deps)


def cmd_delete(args: argparse.Namespace, deps: CliDeps) -> int:
    return _targeted("delete", "DELETED", "delete", args, deps)


def cmd_clear(args: argparse.Namespace, deps: CliDeps) -> int:
    count = _manager(args, deps).clear_completed()
    message = deps.translate("CLEARED", count=count)
    if _json_mode(args):
        return structured_response("clear", message=message, payload={"deleted": count})
    print(message)
    return 0


def cmd_serve(args: argparse.Namespace, deps: CliDeps) -> int:
    import uvicorn

    from config import get_host, get_port
    from interface.http_api import create_app

    host = args.host if args.host is not None else get_host()
    port = args.port if args.port is not None else get_port()
    app = create_app(manager=_manager(args, deps))
    print(deps.translate("SERVER_RUNNING", host=host, port=port))
    logger.info("Serving todo API on %s:%s", host, port)
    uvicorn.run(app, host=host, port=port)
    return 0


__all__ = [
    "CliDeps",
    "cmd_add",
    "cmd_list",
    "cmd_done",
    "cmd_undone",
    "cmd_delete",
    "cmd_clear",
    "cmd_serve",
]

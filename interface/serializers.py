"""Canonical JSON contract for todos.

The CLI --json mode and the HTTP API both render todos through here so the
wire shape matches the file shape (``createdAt``, not ``created_at``).
"""

from typing import Any, Dict, Iterable, List

from core import Todo


def todo_to_dict(todo: Todo) -> Dict[str, Any]:
    return todo.to_dict()


def todos_to_list(todos: Iterable[Todo]) -> List[Dict[str, Any]]:
    return [todo_to_dict(t) for t in todos]


__all__ = ["todo_to_dict", "todos_to_list"]

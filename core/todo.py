"""Todo records and the store snapshot they live in.

Pure domain logic: no I/O here. Repositories turn a ``TodoStore`` into bytes
and back; the manager applies mutations to it.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def now_timestamp() -> str:
    """UTC timestamp with millisecond precision, e.g. 2026-10-19T12:00:00.000Z."""
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


@dataclass
class Todo:
    id: int
    text: str
    completed: bool = False
    created_at: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the on-disk key names."""
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Todo":
        """Deserialize a stored record.

        Raises KeyError/TypeError/ValueError when the record has no usable id
        or a field holds the wrong JSON type; values are never coerced.
        """
        if not isinstance(data, dict):
            raise TypeError("todo record must be a JSON object")
        text = data.get("text", "")
        completed = data.get("completed", False)
        created_at = data.get("createdAt", "")
        if not isinstance(text, str):
            raise TypeError(f"text must be a string, got {type(text).__name__}")
        if not isinstance(completed, bool):
            raise TypeError(f"completed must be a boolean, got {type(completed).__name__}")
        if not isinstance(created_at, str):
            raise TypeError(f"createdAt must be a string, got {type(created_at).__name__}")
        return cls(id=int(data["id"]), text=text, completed=completed, created_at=created_at)


@dataclass
class TodoStore:
    todos: List[Todo] = field(default_factory=list)
    next_id: int = 1

    def find(self, todo_id: int) -> Optional[Todo]:
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None

    def max_id(self) -> int:
        return max((t.id for t in self.todos), default=0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "todos": [t.to_dict() for t in self.todos],
            "nextId": self.next_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TodoStore":
        """Build a store from parsed JSON.

        Raises ValueError when the payload does not have the store shape.
        """
        if not isinstance(data, dict):
            raise ValueError("store must be a JSON object")
        raw_todos = data.get("todos", [])
        if not isinstance(raw_todos, list):
            raise ValueError("'todos' must be a list")
        try:
            todos = [Todo.from_dict(item) for item in raw_todos]
            next_id = int(data.get("nextId", 1))
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"malformed todo record: {exc}") from exc
        return cls(todos=todos, next_id=next_id)


def parse_todo_id(raw: Any) -> Optional[int]:
    """Read the leading integer of ``raw`` (``"1abc"`` and ``"1.5"`` are 1).

    Returns None when there are no leading digits; callers report that as not found.
    """
    match = _LEADING_INT.match(str(raw))
    return int(match.group(1)) if match else None


def format_todo(todo: Todo) -> str:
    """Render ``[x] 3: text`` / ``[ ] 3: text``."""
    status = "[x]" if todo.completed else "[ ]"
    return f"{status} {todo.id}: {todo.text}"


__all__ = ["Todo", "TodoStore", "format_todo", "now_timestamp", "parse_todo_id"]

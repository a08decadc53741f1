from .errors import StoreCorruptedError, TodoError
from .todo import Todo, TodoStore, format_todo, now_timestamp, parse_todo_id

__all__ = [
    "Todo",
    "TodoStore",
    "format_todo",
    "now_timestamp",
    "parse_todo_id",
    # Errors
    "TodoError",
    "StoreCorruptedError",
]

from typing import Protocol

from core import TodoStore


class TodoRepository(Protocol):
    def load(self) -> TodoStore:
        ...

    def save(self, store: TodoStore) -> None:
        ...

import copy

from core import TodoStore


class InMemoryTodoRepository:
    """Keeps the store in process memory; each load hands out a private copy."""

    def __init__(self, store: TodoStore | None = None):
        self._store = copy.deepcopy(store) if store is not None else TodoStore()
        self.saves = 0

    def load(self) -> TodoStore:
        return copy.deepcopy(self._store)

    def save(self, store: TodoStore) -> None:
        self._store = copy.deepcopy(store)
        self.saves += 1

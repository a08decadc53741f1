"""Application-level todo service: every operation is one load → mutate → save."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from application.ports import TodoRepository
from config import get_corrupt_policy, get_data_file
from core import Todo, TodoStore, now_timestamp
from infrastructure.file_repository import FileTodoRepository

logger = logging.getLogger("todo.store")


class TodoManager:
    def __init__(
        self,
        data_file: Optional[Path] = None,
        repository: Optional[TodoRepository] = None,
        on_corrupt: Optional[str] = None,
    ):
        if repository is None:
            path = Path(data_file) if data_file is not None else get_data_file()
            repository = FileTodoRepository(path, on_corrupt=on_corrupt or get_corrupt_policy())
        self.repo: TodoRepository = repository

    def load(self) -> TodoStore:
        return self.repo.load()

    def save(self, store: TodoStore) -> None:
        self.repo.save(store)

    def add(self, text: str) -> Todo:
        store = self.load()
        todo = Todo(id=store.next_id, text=text, completed=False, created_at=now_timestamp())
        store.todos.append(todo)
        store.next_id += 1
        self.save(store)
        logger.debug("Added todo %s", todo.id)
        return todo

    def list(self, show_all: bool = True) -> List[Todo]:
        store = self.load()
        if show_all:
            return store.todos
        return [t for t in store.todos if not t.completed]

    def _set_completed(self, todo_id: int, completed: bool) -> Optional[Todo]:
        store = self.load()
        todo = store.find(todo_id)
        if todo is None:
            return None
        todo.completed = completed
        self.save(store)
        logger.debug("Set todo %s completed=%s", todo_id, completed)
        return todo

    def complete(self, todo_id: int) -> Optional[Todo]:
        return self._set_completed(todo_id, True)

    def uncomplete(self, todo_id: int) -> Optional[Todo]:
        return self._set_completed(todo_id, False)

    def delete(self, todo_id: int) -> Optional[Todo]:
        store = self.load()
        todo = store.find(todo_id)
        if todo is None:
            return None
        store.todos.remove(todo)
        self.save(store)
        logger.debug("Deleted todo %s", todo_id)
        return todo

    def clear_completed(self) -> int:
        store = self.load()
        before = len(store.todos)
        store.todos = [t for t in store.todos if not t.completed]
        removed = before - len(store.todos)
        self.save(store)
        logger.debug("Cleared %s completed todo(s)", removed)
        return removed

import json
import logging
from pathlib import Path

from core import StoreCorruptedError, TodoStore

logger = logging.getLogger("todo.store")


class FileTodoRepository:
    """Whole-file JSON persistence for a todo store.

    ``on_corrupt`` decides what an unreadable file means: ``"reset"`` starts
    over with an empty store, ``"raise"`` raises StoreCorruptedError.
    Saving always overwrites the file in place.
    """

    def __init__(self, path: Path, on_corrupt: str = "reset"):
        if on_corrupt not in ("reset", "raise"):
            raise ValueError(f"Unknown corruption policy: {on_corrupt}")
        self.path = Path(path)
        self.on_corrupt = on_corrupt

    def load(self) -> TodoStore:
        if not self.path.exists():
            return TodoStore()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            store = TodoStore.from_dict(data)
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            # json.JSONDecodeError is a ValueError
            if self.on_corrupt == "raise":
                raise StoreCorruptedError(self.path, str(exc)) from exc
            logger.warning("Unreadable todo store %s, starting empty: %s", self.path, exc)
            return TodoStore()
        highest = store.max_id()
        if store.next_id <= highest:
            logger.warning("nextId %s in %s is not above id %s; repairing", store.next_id, self.path, highest)
            store.next_id = highest + 1
        return store

    def save(self, store: TodoStore) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(store.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")

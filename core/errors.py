"""Errors raised by the todo store."""

from pathlib import Path
from typing import Optional


class TodoError(Exception):
    """Base class for store failures."""


class StoreCorruptedError(TodoError):
    """Backing file exists but cannot be read as a todo store."""

    def __init__(self, path: Optional[Path], reason: str):
        self.path = path
        self.reason = reason
        where = str(path) if path else "<store>"
        super().__init__(f"Corrupted todo store {where}: {reason}")

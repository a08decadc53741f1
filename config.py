from __future__ import annotations

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional

USER_CONFIG_PATH = Path.home() / ".todo_config.yaml"

DEFAULT_DATA_FILE = "todos.json"
DEFAULT_PUBLIC_DIR = "public"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000
CORRUPT_POLICIES = ("reset", "raise")


def _load_config() -> Dict[str, Any]:
    if not USER_CONFIG_PATH.exists():
        return {}
    try:
        data = yaml.safe_load(USER_CONFIG_PATH.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _setting(env_name: str, key: str) -> str:
    """Environment wins over the YAML file; empty string when neither is set."""
    env_value = os.environ.get(env_name)
    if env_value:
        return env_value.strip()
    value = _load_config().get(key)
    return str(value).strip() if value is not None else ""


def get_data_file(explicit: Optional[str] = None) -> Path:
    raw = explicit or _setting("TODO_DATA_FILE", "data_file") or DEFAULT_DATA_FILE
    path = Path(raw).expanduser()
    return path if path.is_absolute() else Path.cwd() / path


def get_corrupt_policy() -> str:
    value = _setting("TODO_ON_CORRUPT", "on_corrupt").lower()
    return value if value in CORRUPT_POLICIES else "reset"


def get_public_dir() -> Path:
    raw = _setting("TODO_PUBLIC_DIR", "public_dir") or DEFAULT_PUBLIC_DIR
    path = Path(raw).expanduser()
    return path if path.is_absolute() else Path.cwd() / path


def get_host() -> str:
    return _setting("HOST", "host") or DEFAULT_HOST


def get_port() -> int:
    raw = _setting("PORT", "port")
    try:
        return int(raw) if raw else DEFAULT_PORT
    except ValueError:
        return DEFAULT_PORT


def get_cors_origins() -> List[str]:
    env_value = os.environ.get("CORS_ALLOW_ORIGINS")
    if env_value:
        return [o.strip() for o in env_value.split(",") if o.strip()]
    value = _load_config().get("cors_origins")
    if isinstance(value, list):
        return [str(o).strip() for o in value if str(o).strip()]
    if isinstance(value, str) and value.strip():
        return [o.strip() for o in value.split(",") if o.strip()]
    return ["*"]


def get_user_lang() -> str:
    return str(_load_config().get("lang", "") or "").strip()

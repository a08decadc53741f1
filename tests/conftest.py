import pytest

import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's ~/.todo_config.yaml and TODO_* env out of every test."""
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "todo_config.yaml")
    for name in ("TODO_DATA_FILE", "TODO_ON_CORRUPT", "TODO_PUBLIC_DIR", "TODO_LANG", "PORT", "HOST", "CORS_ALLOW_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path / "todo_config.yaml"

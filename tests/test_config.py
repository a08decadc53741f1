from pathlib import Path

import config


def test_defaults_without_env_or_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert config.get_data_file() == tmp_path / "todos.json"
    assert config.get_corrupt_policy() == "reset"
    assert config.get_port() == 3000
    assert config.get_host() == "127.0.0.1"
    assert config.get_cors_origins() == ["*"]
    assert config.get_public_dir() == tmp_path / "public"
    assert config.get_user_lang() == ""


def test_yaml_file_values(isolated_config: Path, tmp_path):
    isolated_config.write_text(
        "data_file: /srv/todo/list.json\n"
        "on_corrupt: raise\n"
        "port: 8081\n"
        "cors_origins: [https://a.example, https://b.example]\n"
        "lang: ru\n",
        encoding="utf-8",
    )
    assert config.get_data_file() == Path("/srv/todo/list.json")
    assert config.get_corrupt_policy() == "raise"
    assert config.get_port() == 8081
    assert config.get_cors_origins() == ["https://a.example", "https://b.example"]
    assert config.get_user_lang() == "ru"


def test_env_overrides_yaml(isolated_config: Path, monkeypatch):
    isolated_config.write_text("port: 8081\non_corrupt: raise\n", encoding="utf-8")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("TODO_ON_CORRUPT", "reset")
    assert config.get_port() == 9000
    assert config.get_corrupt_policy() == "reset"


def test_explicit_data_file_wins(monkeypatch, tmp_path):
    monkeypatch.setenv("TODO_DATA_FILE", str(tmp_path / "env.json"))
    assert config.get_data_file(str(tmp_path / "cli.json")) == tmp_path / "cli.json"
    assert config.get_data_file() == tmp_path / "env.json"


def test_bad_values_fall_back(isolated_config: Path, monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    monkeypatch.setenv("TODO_ON_CORRUPT", "explode")
    assert config.get_port() == 3000
    assert config.get_corrupt_policy() == "reset"


def test_unreadable_yaml_is_empty_config(isolated_config: Path):
    isolated_config.write_text("port: [unclosed\n", encoding="utf-8")
    assert config.get_port() == 3000
    isolated_config.write_text("- just\n- a list\n", encoding="utf-8")
    assert config.get_corrupt_policy() == "reset"

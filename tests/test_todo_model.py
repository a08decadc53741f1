import re

import pytest

from core import Todo, TodoStore, format_todo, now_timestamp, parse_todo_id


def test_format_todo_marks_completion():
    assert format_todo(Todo(id=3, text="buy milk")) == "[ ] 3: buy milk"
    assert format_todo(Todo(id=3, text="buy milk", completed=True)) == "[x] 3: buy milk"


def test_todo_dict_uses_file_key_names():
    todo = Todo(id=1, text="a", completed=True, created_at="2026-01-01T00:00:00.000Z")
    data = todo.to_dict()
    assert data == {"id": 1, "text": "a", "completed": True, "createdAt": "2026-01-01T00:00:00.000Z"}
    assert Todo.from_dict(data) == todo


def test_now_timestamp_is_utc_millis():
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z", now_timestamp())


def test_store_from_dict_defaults_and_find():
    store = TodoStore.from_dict({"todos": [{"id": 2, "text": "b"}], "nextId": 5})
    assert store.next_id == 5
    assert store.find(2).text == "b"
    assert store.find(2).completed is False
    assert store.find(9) is None
    assert TodoStore.from_dict({}).to_dict() == {"todos": [], "nextId": 1}


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"todos": {"id": 1}},
        {"todos": [{"text": "no id"}]},
        {"todos": [], "nextId": "soon"},
    ],
)
def test_store_from_dict_rejects_bad_shapes(payload):
    with pytest.raises(ValueError):
        TodoStore.from_dict(payload)


def test_parse_todo_id_reads_leading_digits():
    assert parse_todo_id("7") == 7
    assert parse_todo_id(" 12 ") == 12
    assert parse_todo_id("1abc") == 1
    assert parse_todo_id("1.5") == 1
    assert parse_todo_id("1_0") == 1
    assert parse_todo_id("abc") is None
    assert parse_todo_id("") is None


@pytest.mark.parametrize(
    "record",
    [
        {"id": 1, "text": None},
        {"id": 1, "text": "a", "completed": "false"},
        {"id": 1, "text": "a", "completed": 0},
        {"id": 1, "text": "a", "createdAt": 1700000000},
        7,
    ],
)
def test_wrongly_typed_record_is_malformed(record):
    with pytest.raises(TypeError):
        Todo.from_dict(record)
    with pytest.raises(ValueError):
        TodoStore.from_dict({"todos": [record], "nextId": 2})

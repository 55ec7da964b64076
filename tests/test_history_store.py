import sys
import os
import json
import pytest
from unittest.mock import patch

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../backend')))

from helatype.store.history_store import (
    HistoryItem,
    HistoryStoreError,
    InMemoryHistoryStore,
    JsonFileHistoryStore,
)


def test_add_puts_newest_first():
    store = InMemoryHistoryStore()
    first = store.add("අම්ම")
    second = store.add("තාත්තා")

    items = store.list_items()
    assert [item.id for item in items] == [second.id, first.id]
    assert items[0].text == "තාත්තා"


def test_ids_are_unique_within_same_millisecond():
    store = InMemoryHistoryStore()
    ids = {store.add("text").id for _ in range(20)}
    assert len(ids) == 20


def test_item_fields():
    store = InMemoryHistoryStore()
    item = store.add("ගෙදර")
    assert item.id.isdigit()
    assert isinstance(item.timestamp, int)
    assert item.timestamp > 0
    assert store.get(item.id) == item


def test_delete():
    store = InMemoryHistoryStore()
    item = store.add("ගෙදර")
    assert store.delete(item.id) is True
    assert store.get(item.id) is None
    assert store.delete(item.id) is False


def test_clear():
    store = InMemoryHistoryStore()
    store.add("one")
    store.add("two")
    store.clear()
    assert len(store) == 0


def test_json_store_starts_empty(tmp_path):
    store = JsonFileHistoryStore(tmp_path / "history.json")
    assert store.list_items() == []
    assert not (tmp_path / "history.json").exists()


def test_json_store_persists_every_change(tmp_path):
    path = tmp_path / "nested" / "history.json"
    store = JsonFileHistoryStore(path)
    kept = store.add("අම්ම")
    removed = store.add("තාත්තා")
    store.delete(removed.id)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data == [{"id": kept.id, "text": "අම්ම", "timestamp": kept.timestamp}]


def test_json_store_reloads(tmp_path):
    path = tmp_path / "history.json"
    store = JsonFileHistoryStore(path)
    first = store.add("one")
    second = store.add("two")

    reloaded = JsonFileHistoryStore(path)
    assert reloaded.list_items() == [second, first]


def test_json_store_reads_existing_file(tmp_path):
    path = tmp_path / "history.json"
    path.write_text(json.dumps([{"id": "1700000000000", "text": "ළ", "timestamp": 1700000000000}]), encoding="utf-8")

    store = JsonFileHistoryStore(path)
    assert store.list_items() == [HistoryItem(id="1700000000000", text="ළ", timestamp=1700000000000)]


def test_json_store_rejects_corrupt_file(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(HistoryStoreError):
        JsonFileHistoryStore(path)


def test_failed_add_leaves_history_unchanged(tmp_path):
    path = tmp_path / "history.json"
    store = JsonFileHistoryStore(path)
    kept = store.add("අම්ම")

    with patch("helatype.store.history_store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(HistoryStoreError):
            store.add("තාත්තා")

    assert store.list_items() == [kept]
    assert json.loads(path.read_text(encoding="utf-8")) == [kept.to_dict()]
    assert [p.name for p in tmp_path.iterdir()] == ["history.json"]


def test_failed_delete_keeps_item(tmp_path):
    store = JsonFileHistoryStore(tmp_path / "history.json")
    item = store.add("ගෙදර")

    with patch("helatype.store.history_store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(HistoryStoreError):
            store.delete(item.id)

    assert store.get(item.id) == item
    assert JsonFileHistoryStore(tmp_path / "history.json").list_items() == [item]


def test_failed_clear_keeps_items(tmp_path):
    store = JsonFileHistoryStore(tmp_path / "history.json")
    first = store.add("one")
    second = store.add("two")

    with patch("helatype.store.history_store.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(HistoryStoreError):
            store.clear()

    assert store.list_items() == [second, first]
    assert len(store) == 2

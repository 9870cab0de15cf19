"""
Tests for the SQLite-backed record store.
"""

import pytest

from pig_farm_api.app.core.db import RecordStore, TABLES, get_database_path
from pig_farm_api.app.core.errors import StorageFault


@pytest.fixture
def ready_store(store: RecordStore) -> RecordStore:
    store.init_db()
    return store


def test_init_creates_every_table(ready_store: RecordStore) -> None:
    for table in TABLES:
        assert ready_store.values(table) == []


def test_values_are_ordered_by_identifier(ready_store: RecordStore) -> None:
    for key in ["b", "c", "a"]:
        ready_store.insert("pigs", key, {"id": key})
    assert [doc["id"] for doc in ready_store.values("pigs")] == ["a", "b", "c"]
    assert len(ready_store.values("pigs")) == 3


def test_identifier_is_never_overwritten(ready_store: RecordStore) -> None:
    ready_store.insert("invoices", "inv-1", {"id": "inv-1", "amount": 10})
    with pytest.raises(StorageFault):
        ready_store.insert("invoices", "inv-1", {"id": "inv-1", "amount": 99})
    assert ready_store.values("invoices") == [{"id": "inv-1", "amount": 10}]


def test_unknown_table(ready_store: RecordStore) -> None:
    with pytest.raises(StorageFault):
        ready_store.insert("cows", "c-1", {})
    with pytest.raises(StorageFault):
        ready_store.values("pigs; DROP TABLE pigs")


def test_closed_store_raises_storage_fault(ready_store: RecordStore) -> None:
    ready_store.close()
    with pytest.raises(StorageFault):
        ready_store.values("pigs")
    with pytest.raises(StorageFault):
        ready_store.insert("pigs", "p-1", {"id": "p-1"})


def test_records_survive_reopen(tmp_path) -> None:
    db_file = str(tmp_path / "farm.db")
    store = RecordStore(db_file)
    store.init_db()
    store.insert("feeds", "f-1", {"id": "f-1", "feedType": "hay"})
    store.close()

    reopened = RecordStore(db_file)
    reopened.init_db()  # migrations already applied; must be a no-op
    try:
        assert reopened.values("feeds") == [{"id": "f-1", "feedType": "hay"}]
    finally:
        reopened.close()


def test_database_path_resolution(tmp_path) -> None:
    assert get_database_path(":memory:") == ":memory:"
    absolute = str(tmp_path / "farm.db")
    assert get_database_path(absolute) == absolute
    resolved = get_database_path("farm.db")
    assert resolved.endswith("farm.db")
    assert resolved != "farm.db"

import json
from datetime import datetime, timezone

import pytest

from app.core.errors import RecordNotFoundError, RecordValidationError, StorageError
from app.database import JsonStore, init_db, test_connection as check_connection
from app.models import COLLECTIONS
from app.services.property_service import PropertyService


class SequentialIds:
    def __init__(self):
        self.count = 0

    def new_id(self, prefix):
        self.count += 1
        return f"{prefix}-{self.count}"


def fixed_clock():
    return datetime(2026, 3, 1, 9, 30, 0, 123000, tzinfo=timezone.utc)


def test_load_creates_missing_file(store):
    data = store.load()

    assert store.path.exists()
    assert sorted(data) == sorted(COLLECTIONS)
    assert all(data[name] == [] for name in COLLECTIONS)


def test_missing_collections_are_empty_lists(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps({"properties": [{"id": "p1"}], "legacy": [1, 2]}))

    data = store.load()

    assert data["properties"] == [{"id": "p1"}]
    assert data["receipts"] == []
    assert data["rentalContracts"] == []


def test_unknown_keys_survive_save(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps({"legacy": {"keep": True}}))

    store.save(store.load())

    assert json.loads(store.path.read_text())["legacy"] == {"keep": True}


def test_load_is_idempotent(store):
    store.save({**store.load(), "customers": [{"id": "c1", "name": "Ali"}]})

    first = store.load()
    second = store.load()

    assert first == second
    first["customers"].clear()
    assert store.load()["customers"] == [{"id": "c1", "name": "Ali"}]


def test_corrupt_file_raises_storage_error(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json")

    with pytest.raises(StorageError):
        store.load()
    assert check_connection(store) is False


def test_non_object_document_raises_storage_error(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("[]")

    with pytest.raises(StorageError):
        store.load()


def test_save_leaves_no_temporary_files(store):
    store.save(store.load())
    store.save(store.load())

    assert [p.name for p in store.path.parent.iterdir()] == ["db.json"]


def test_init_db_writes_empty_document(tmp_path):
    store = JsonStore(tmp_path / "nested" / "db.json")

    assert init_db(store) is True
    assert json.loads(store.path.read_text())["users"] == []


def test_index_maps_ids_to_records():
    data = {"customers": [{"id": "a", "name": "A"}, {"name": "no id"}, {"id": "b"}]}

    index = JsonStore.index(data, "customers")

    assert set(index) == {"a", "b"}
    assert index["a"]["name"] == "A"


# ── Record service behaviour ────────────────────────────────────────────────

@pytest.fixture
def properties(store):
    return PropertyService(store, id_generator=SequentialIds(), clock=fixed_clock)


def villa_draft(**overrides):
    draft = {"name": "Villa A", "type": "villa", "location": "Muscat", "price": 50000, "area": 300}
    draft.update(overrides)
    return draft


def test_create_assigns_id_and_shared_timestamps(properties):
    record = properties.create(villa_draft())

    assert record["id"] == "prop-1"
    assert record["createdAt"] == record["updatedAt"] == "2026-03-01T09:30:00.123Z"
    assert record["images"] == []
    assert record["features"] == []
    assert record["status"] == "available"
    assert properties.list() == [record]


def test_create_keeps_caller_id(properties):
    record = properties.create(villa_draft(id="villa-a"))

    assert record["id"] == "villa-a"
    assert properties.get("villa-a") == record


def test_update_merges_and_keeps_id(store, properties):
    created = properties.create(villa_draft())
    later = PropertyService(
        store, clock=lambda: datetime(2026, 3, 2, tzinfo=timezone.utc)
    )

    updated = later.update(created["id"], {"id": "other", "price": 65000})

    assert updated["id"] == created["id"]
    assert updated["price"] == 65000
    assert updated["name"] == "Villa A"
    assert updated["createdAt"] == created["createdAt"]
    assert updated["updatedAt"] == "2026-03-02T00:00:00.000Z"


def test_update_missing_record_leaves_collection_unchanged(store, properties):
    properties.create(villa_draft())
    before = store.load()["properties"]

    with pytest.raises(RecordNotFoundError):
        properties.update("missing", {"name": "X"})

    assert store.load()["properties"] == before


def test_delete_twice(properties):
    record = properties.create(villa_draft())
    properties.create(villa_draft(name="Villa B"))

    properties.delete(record["id"])
    with pytest.raises(RecordNotFoundError):
        properties.delete(record["id"])

    assert [p["name"] for p in properties.list()] == ["Villa B"]


def test_duplicate_caller_id_is_rejected(store, properties):
    properties.create(villa_draft(id="villa-a"))

    with pytest.raises(RecordValidationError) as excinfo:
        properties.create(villa_draft(id="villa-a", name="Villa B"))

    assert excinfo.value.messages == ["Property with this ID already exists"]
    assert [p["name"] for p in store.load()["properties"]] == ["Villa A"]

    properties.delete("villa-a")
    with pytest.raises(RecordNotFoundError):
        properties.delete("villa-a")


def test_positive_fields_are_checked_on_update(store, properties):
    created = properties.create(villa_draft(price="50000"))
    assert created["price"] == 50000.0

    with pytest.raises(RecordValidationError) as excinfo:
        properties.update(created["id"], {"price": "abc", "area": 0})

    assert excinfo.value.messages == ["Price must be greater than 0", "Area must be greater than 0"]
    assert store.load()["properties"][0]["price"] == 50000.0
    assert properties.update(created["id"], {"area": "320.5"})["area"] == 320.5

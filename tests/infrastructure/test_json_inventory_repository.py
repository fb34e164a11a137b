"""Tests for the JSON-file-backed inventory repository."""

import json
from datetime import date

import pytest

from sis.domain.exceptions import RepositoryError
from sis.domain.model.inventory import Batch, Category, InventoryItem
from sis.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)


def _item() -> InventoryItem:
    return InventoryItem(
        id="abc1234",
        name="Pineapple cake",
        category=Category.PINEAPPLE_CAKE,
        batches=(Batch("b1", date(2025, 6, 1), 5), Batch("b2", date(2025, 5, 1), 3)),
    )


class TestJsonInventoryRepository:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "inventory.json"
        repo = JsonInventoryRepository(path)
        assert json.loads(path.read_text(encoding="utf-8")) == {}
        assert repo.list_all() == []

    def test_seed_written_on_creation_only(self, tmp_path):
        path = tmp_path / "inventory.json"
        JsonInventoryRepository(path, seed=[_item()])
        repo = JsonInventoryRepository(path, seed=[])
        assert repo.list_all() == [_item()]

    def test_save_and_get_round_trip(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "inventory.json")
        repo.save(_item())
        assert repo.get_by_id("abc1234") == _item()
        assert repo.get_by_id("missing") is None

    def test_persisted_shape(self, tmp_path):
        path = tmp_path / "inventory.json"
        JsonInventoryRepository(path).save(_item())

        raw = json.loads(path.read_text(encoding="utf-8"))
        assert raw["abc1234"] == {
            "id": "abc1234",
            "name": "Pineapple cake",
            "category": "pineapple_cake",
            "batches": [
                {"id": "b1", "expiryDate": "2025-06-01", "quantity": 5},
                {"id": "b2", "expiryDate": "2025-05-01", "quantity": 3},
            ],
        }

    def test_save_overwrites_whole_item(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "inventory.json")
        repo.save(_item())
        repo.save(_item().with_batches([]))
        assert repo.get_by_id("abc1234").batches == ()
        assert len(repo.list_all()) == 1

    def test_delete(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "inventory.json")
        repo.save(_item())
        repo.delete("abc1234")
        assert repo.get_by_id("abc1234") is None

    def test_delete_missing_is_noop(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "inventory.json")
        received = []
        repo.subscribe(received.append)
        repo.delete("nope")
        assert len(received) == 1

    def test_missing_batches_key_loads_as_empty(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text(
            json.dumps({"x": {"id": "x", "name": "Mochi", "category": "other"}}),
            encoding="utf-8",
        )
        assert JsonInventoryRepository(path).get_by_id("x").batches == ()

    def test_subscribers_notified_on_save(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "inventory.json")
        received = []
        repo.subscribe(received.append)
        repo.save(_item())
        assert received == [[], [_item()]]

    def test_malformed_json_raises_repository_error(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RepositoryError, match="Cannot read"):
            JsonInventoryRepository(path).list_all()

    def test_invalid_utf8_raises_repository_error(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_bytes(b'{"a": "\xff\xfe"}')
        with pytest.raises(RepositoryError, match="Cannot read"):
            JsonInventoryRepository(path).list_all()

    def test_non_object_root_raises_repository_error(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(RepositoryError, match="JSON object"):
            JsonInventoryRepository(path).list_all()

    def test_unknown_category_raises_repository_error(self, tmp_path):
        path = tmp_path / "inventory.json"
        path.write_text(
            json.dumps({"x": {"id": "x", "name": "Bread", "category": "bread", "batches": []}}),
            encoding="utf-8",
        )
        with pytest.raises(RepositoryError, match="Corrupt"):
            JsonInventoryRepository(path).get_by_id("x")

    def test_unreadable_file_raises_repository_error(self, tmp_path):
        repo = JsonInventoryRepository(tmp_path / "inventory.json")
        (tmp_path / "inventory.json").unlink()
        with pytest.raises(RepositoryError):
            repo.get_by_id("x")

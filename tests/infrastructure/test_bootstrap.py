"""Tests for the composition root and demo seeding."""

from datetime import date

from sis.domain.service.stock_aggregator import is_expiring_soon, total_stock
from sis.infrastructure.bootstrap import inventory_repository
from sis.infrastructure.config import Settings
from sis.infrastructure.persistence.demo_seed import demo_items


class TestInventoryRepository:

    def test_new_store_is_empty_by_default(self, tmp_path):
        repo = inventory_repository(Settings(data_dir=tmp_path))
        assert repo.list_all() == []

    def test_seed_demo_fills_new_store(self, tmp_path):
        repo = inventory_repository(Settings(data_dir=tmp_path, seed_demo=True))
        assert sorted(i.id for i in repo.list_all()) == ["demo001", "demo002"]

    def test_seed_demo_leaves_existing_store_alone(self, tmp_path):
        inventory_repository(Settings(data_dir=tmp_path))
        repo = inventory_repository(Settings(data_dir=tmp_path, seed_demo=True))
        assert repo.list_all() == []


class TestDemoItems:

    def test_demo_items_need_attention(self):
        today = date(2025, 6, 1)
        pineapple, pastry = demo_items(today)

        assert total_stock(pineapple) == 12
        assert is_expiring_soon(pineapple, today=today)
        assert is_expiring_soon(pastry, today=today)

"""JSON-file-backed implementation of InventoryRepository.

The file holds one object keyed by item id::

    {"<id>": {"id": ..., "name": ..., "category": ...,
              "batches": [{"id": ..., "expiryDate": "YYYY-MM-DD", "quantity": 3}]}}
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from sis.domain.exceptions import RepositoryError
from sis.domain.model.inventory import Batch, Category, InventoryItem
from sis.domain.repository.change_notifier import ChangeNotifier
from sis.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class JsonInventoryRepository(InventoryRepository):

    def __init__(
        self,
        file_path: Path,
        notifier: ChangeNotifier | None = None,
        seed: list[InventoryItem] | None = None,
    ) -> None:
        super().__init__(notifier)
        self._file_path = file_path
        self._ensure_file(seed or [])

    # --- InventoryRepository interface ----------------------------------------

    def get_by_id(self, item_id: str) -> InventoryItem | None:
        raw = self._load_raw().get(item_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self) -> list[InventoryItem]:
        return [self._to_domain(raw) for raw in self._load_raw().values()]

    def save(self, item: InventoryItem) -> None:
        records = self._load_raw()
        records[item.id] = self._to_raw(item)
        self._persist_raw(records)
        self._publish()

    def delete(self, item_id: str) -> None:
        records = self._load_raw()
        if records.pop(item_id, None) is None:
            return
        self._persist_raw(records)
        self._publish()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "category": item.category.value,
            "batches": [
                {
                    "id": b.id,
                    "expiryDate": b.expiry_date.isoformat(),
                    "quantity": b.quantity,
                }
                for b in item.batches
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        try:
            return InventoryItem(
                id=raw["id"],
                name=raw["name"],
                category=Category(raw["category"]),
                # Stores that drop empty lists may omit "batches"
                batches=tuple(
                    Batch(
                        id=b["id"],
                        expiry_date=date.fromisoformat(b["expiryDate"]),
                        quantity=int(b["quantity"]),
                    )
                    for b in raw.get("batches") or []
                ),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise RepositoryError(f"Corrupt inventory record: {raw!r}") from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise RepositoryError(
                f"Cannot read inventory from {self._file_path}: {exc}"
            ) from exc
        if not isinstance(data, dict):
            raise RepositoryError(
                f"Inventory file {self._file_path} must hold a JSON object"
            )
        return data

    def _persist_raw(self, records: dict[str, dict]) -> None:
        try:
            self._file_path.write_text(
                json.dumps(records, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise RepositoryError(
                f"Cannot write inventory to {self._file_path}: {exc}"
            ) from exc

    def _ensure_file(self, seed: list[InventoryItem]) -> None:
        if self._file_path.exists():
            return
        logger.info("Creating inventory file %s", self._file_path)
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise RepositoryError(
                f"Cannot create data directory {self._file_path.parent}: {exc}"
            ) from exc
        self._persist_raw({item.id: self._to_raw(item) for item in seed})

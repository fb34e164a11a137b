"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from sis.infrastructure.config import Settings
from sis.infrastructure.persistence.demo_seed import demo_items
from sis.infrastructure.persistence.json_inventory_repository import (
    JsonInventoryRepository,
)


def settings() -> Settings:
    return Settings.from_env()


def inventory_repository(current: Settings | None = None) -> JsonInventoryRepository:
    current = current or settings()
    # Only applied when the store file does not exist yet
    seed = demo_items() if current.seed_demo else None
    return JsonInventoryRepository(current.inventory_file, seed=seed)

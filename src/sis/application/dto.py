"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IntakeSpec:
    """Input: one received batch (item name or id, expiry date, quantity)."""

    item: str
    expiry_date: str
    quantity: int


@dataclass(frozen=True)
class TakeSpec:
    """Input: how many units of an item the user wants to take."""

    item: str
    quantity: int


@dataclass(frozen=True)
class ItemDTO:
    id: str
    name: str
    category: str


@dataclass(frozen=True)
class BatchLineDTO:
    id: str
    expiry_date: str  # YYYY-MM-DD
    quantity: int
    days_remaining: int


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one item as displayed in the inventory listing."""

    id: str
    name: str
    category: str
    total: int
    status: str
    nearest_expiry: str | None
    days_remaining: int | None
    batches: list[BatchLineDTO]

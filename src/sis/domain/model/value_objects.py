"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from datetime import date

from sis.domain.exceptions import ValidationError

_ID_ALPHABET = string.digits + string.ascii_lowercase
ID_LENGTH = 7


def generate_id() -> str:
    """Return a short random base-36 identifier for items and batches."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot stock or take zero or
    negative units.
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass, but True is not a quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ExpiryDate:
    """A calendar date with no time component, serialized as YYYY-MM-DD."""

    value: date

    def __post_init__(self) -> None:
        if not isinstance(self.value, date):
            raise ValidationError(
                f"Expiry date must be a date, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value.isoformat()

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def of(raw: str | date | None) -> ExpiryDate:
        """Coerce an ISO string or date, rejecting missing or malformed input."""
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            raise ValidationError("Expiry date is required")
        if isinstance(raw, date):
            return ExpiryDate(raw)
        try:
            return ExpiryDate(date.fromisoformat(raw.strip()))
        except ValueError as exc:
            raise ValidationError(
                f"Invalid expiry date {raw!r}, expected YYYY-MM-DD"
            ) from exc

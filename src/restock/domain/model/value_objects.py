"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from restock.domain.exceptions import ValidationError

# Suppliers a replenishment request may be addressed to.
SUPPLIERS: tuple[str, ...] = (
    "Office Depot",
    "Tech Solutions Inc.",
    "Global Supply Co.",
    "Quality Furniture Ltd.",
    "Electra Electronics",
    "Central Stationery",
    "BestValue Wholesalers",
    "Premier Equipment Suppliers",
)


class Urgency(Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"

    @staticmethod
    def parse(raw: str | Urgency | None) -> Urgency:
        """Coerce user input to an Urgency; blank means NORMAL."""
        if isinstance(raw, Urgency):
            return raw
        if raw is None or not str(raw).strip():
            return Urgency.NORMAL
        try:
            return Urgency(str(raw).strip().lower())
        except ValueError as exc:
            raise ValidationError("invalid urgency") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot request zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def parse(raw: str | int | None) -> Quantity:
        """Build a Quantity from form input ("12", " 3 ", 7).

        Anything that is not a positive whole number is rejected with the
        same message, so the user sees one actionable hint.
        """
        if isinstance(raw, bool) or raw is None:
            raise ValidationError("quantity must be positive")
        if isinstance(raw, int):
            value = raw
        else:
            try:
                value = int(str(raw).strip())
            except ValueError as exc:
                raise ValidationError("quantity must be positive") from exc
        return Quantity(value)

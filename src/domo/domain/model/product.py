"""Product record.

Products are owned by the backend: it assigns the ``id`` and the
``created_at`` timestamp. The application only ever sees snapshots,
so a Product is immutable and edits produce a new snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from domo.domain.exceptions import ValidationError
from domo.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the store catalog.

    Invariants:
    - ``name`` is non-empty
    - ``quantity`` is an integer >= 0
    - ``price`` is >= 0 (enforced by Money)
    """

    id: str
    name: str
    quantity: int
    price: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError("Quantity cannot be negative")

    def with_changes(
        self,
        name: str | None = None,
        quantity: int | None = None,
        price: Money | None = None,
    ) -> Product:
        """Return a copy with the given fields replaced; ``id`` never changes."""
        return replace(
            self,
            name=self.name if name is None else name,
            quantity=self.quantity if quantity is None else quantity,
            price=self.price if price is None else price,
        )

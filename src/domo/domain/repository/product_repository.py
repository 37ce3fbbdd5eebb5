"""Abstract repository for Product records.

Defined in the domain layer so the domain never depends on
infrastructure. The backend owns the rows: it assigns ids and
timestamps and enforces the unique product name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from domo.domain.model.product import Product
from domo.domain.model.value_objects import Money


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, newest first (``created_at`` descending)."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def insert(self, name: str, quantity: int, price: Money) -> Product:
        """Create a product and return the stored record.

        Raises UniquenessConflict if the name is taken.
        """

    @abstractmethod
    def update(
        self,
        product_id: str,
        name: str | None = None,
        quantity: int | None = None,
        price: Money | None = None,
    ) -> Product:
        """Change the given fields and return the stored record.

        Raises EntityNotFoundError for an unknown id and
        UniquenessConflict if the new name is taken.
        """

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Raises EntityNotFoundError for an unknown id."""

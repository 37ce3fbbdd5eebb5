"""JSON-file-backed implementation of ProductRepository.

Plays the backend's part for local use: assigns ids and timestamps,
enforces the unique product name and appends an audit entry for every
mutation.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Callable

from domo.domain.exceptions import EntityNotFoundError, UniquenessConflict
from domo.domain.model.audit_log import AuditOperation
from domo.domain.model.product import Product
from domo.domain.model.value_objects import Money
from domo.domain.repository.product_repository import ProductRepository
from domo.infrastructure.persistence.json_audit_log_repository import (
    JsonAuditLogRepository,
)
from domo.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(
        self,
        file_path: Path,
        audit_repo: JsonAuditLogRepository | None = None,
        actor: Callable[[], str | None] = lambda: None,
    ) -> None:
        self._file = JsonFile(file_path, default=[])
        self._audit_repo = audit_repo
        self._actor = actor

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._file.load()]
        # Ties on created_at keep the later-written record first.
        ordered = sorted(
            enumerate(products), key=lambda pair: (pair[1].created_at, pair[0]), reverse=True
        )
        return [product for _, product in ordered]

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def insert(self, name: str, quantity: int, price: Money) -> Product:
        records = self._file.load()
        self._check_unique(records, name)

        product = Product(
            id=uuid.uuid4().hex,
            name=name,
            quantity=quantity,
            price=price,
            created_at=datetime.now(timezone.utc),
        )
        records.append(self._to_raw(product))
        self._file.persist(records)
        self._audit(AuditOperation.INSERT, product)
        return product

    def update(
        self,
        product_id: str,
        name: str | None = None,
        quantity: int | None = None,
        price: Money | None = None,
    ) -> Product:
        records = self._file.load()
        for i, raw in enumerate(records):
            if raw["id"] == product_id:
                break
        else:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None:
            self._check_unique(records, name, ignore_id=product_id)

        product = self._to_domain(records[i]).with_changes(
            name=name, quantity=quantity, price=price
        )
        records[i] = self._to_raw(product)
        self._file.persist(records)
        self._audit(AuditOperation.UPDATE, product)
        return product

    def delete(self, product_id: str) -> None:
        records = self._file.load()
        remaining = [raw for raw in records if raw["id"] != product_id]
        if len(remaining) == len(records):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        deleted = next(raw for raw in records if raw["id"] == product_id)
        self._file.persist(remaining)
        self._audit(AuditOperation.DELETE, self._to_domain(deleted))

    # --- Constraints ----------------------------------------------------------

    @staticmethod
    def _check_unique(records: list[dict], name: str, ignore_id: str | None = None) -> None:
        for raw in records:
            if raw["name"] == name and raw["id"] != ignore_id:
                raise UniquenessConflict(
                    f"duplicate key value violates unique constraint: name={name!r}"
                )

    def _audit(self, operation: AuditOperation, product: Product) -> None:
        if self._audit_repo is None:
            return
        self._audit_repo.record(operation, self._to_raw(product), self._actor())
        logger.debug("Audited %s of product %s", operation.value, product.id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "quantity": product.quantity,
            "price": str(product.price.amount),
            "created_at": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            quantity=raw["quantity"],
            price=Money(Decimal(raw["price"])),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

"""Application service: Update Product use case.

Admins may change any field. Cashiers may only lower (or keep) the
quantity; the check runs against the currently stored record, so an
edit based on a stale copy cannot raise stock either.
"""

from __future__ import annotations

import logging

from domo.application.auth_guard import AuthGuard
from domo.application.dto import ProductPayload
from domo.domain.exceptions import EntityNotFoundError, PermissionDenied
from domo.domain.model.principal import Role
from domo.domain.model.product import Product
from domo.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository, guard: AuthGuard) -> None:
        self._product_repo = product_repo
        self._guard = guard

    def handle(self, product_id: str, payload: ProductPayload) -> Product:
        session = self._guard.require_session()
        role = self._guard.require_role()

        current = self._product_repo.get_by_id(product_id)
        if current is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if role is not Role.ADMIN:
            if payload.name != current.name or payload.price != current.price:
                raise PermissionDenied("Only administrators can change name or price.")
            if payload.quantity > current.quantity:
                raise PermissionDenied("Only administrators can increase quantity.")

        product = self._product_repo.update(
            product_id,
            name=payload.name,
            quantity=payload.quantity,
            price=payload.price,
        )
        logger.info(
            "%s updated product %s: quantity %d -> %d",
            session.email, product_id, current.quantity, product.quantity,
        )
        return product

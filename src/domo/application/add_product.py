"""Application service: Add Product use case (admins only)."""

from __future__ import annotations

import logging

from domo.application.auth_guard import AuthGuard
from domo.application.dto import ProductPayload
from domo.domain.model.product import Product
from domo.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, guard: AuthGuard) -> None:
        self._product_repo = product_repo
        self._guard = guard

    def handle(self, payload: ProductPayload) -> Product:
        """Insert a new product; the backend rejects duplicate names."""
        session = self._guard.require_admin()
        product = self._product_repo.insert(
            name=payload.name, quantity=payload.quantity, price=payload.price
        )
        logger.info("%s created product %s (%s)", session.email, product.id, product.name)
        return product

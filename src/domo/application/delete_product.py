"""Application service: Delete Product use case (admins only)."""

from __future__ import annotations

import logging

from domo.application.auth_guard import AuthGuard
from domo.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository, guard: AuthGuard) -> None:
        self._product_repo = product_repo
        self._guard = guard

    def handle(self, product_id: str) -> None:
        session = self._guard.require_admin()
        self._product_repo.delete(product_id)
        logger.info("%s deleted product %s", session.email, product_id)

"""Application service: List Products use case (query)."""

from __future__ import annotations

from domo.application.auth_guard import AuthGuard
from domo.domain.model.product import Product
from domo.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository, guard: AuthGuard) -> None:
        self._product_repo = product_repo
        self._guard = guard

    def handle(self) -> list[Product]:
        """Every product, newest first. Any signed-in user may look."""
        self._guard.require_session()
        return self._product_repo.list_all()

"""Product list view: the table of products and its create/edit dialogs.

The view keeps the rows it last fetched and at most one open form.
Successful mutations are merged into the rows without refetching:
a created product goes to the top (newest first), an edited product
replaces its old row in place, a deleted product is dropped.
"""

from __future__ import annotations

import logging

from domo.application.add_product import AddProductHandler
from domo.application.auth_guard import AuthGuard
from domo.application.delete_product import DeleteProductHandler
from domo.application.dto import ProductPayload
from domo.application.list_products import ListProductsHandler
from domo.application.product_form import ProductForm
from domo.application.update_product import UpdateProductHandler
from domo.domain.exceptions import EntityNotFoundError, FormClosedError
from domo.domain.model.product import Product
from domo.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductListView:

    def __init__(self, product_repo: ProductRepository, guard: AuthGuard) -> None:
        self._guard = guard
        self._list = ListProductsHandler(product_repo, guard)
        self._add = AddProductHandler(product_repo, guard)
        self._update = UpdateProductHandler(product_repo, guard)
        self._delete = DeleteProductHandler(product_repo, guard)
        self.products: list[Product] = []
        self.active_form: ProductForm | None = None

    def refresh(self) -> list[Product]:
        self.products = self._list.handle()
        return self.products

    # --- Dialogs ---------------------------------------------------------------

    def open_create_form(self) -> ProductForm:
        self._guard.require_admin()
        return self._show(ProductForm(self._guard.require_role()))

    def open_edit_form(self, product_id: str) -> ProductForm:
        """Open an edit dialog seeded from the row as currently stored."""
        product = self._find(product_id)
        return self._show(ProductForm(self._guard.require_role(), product))

    def submit(self) -> Product | None:
        """Submit the open dialog and merge the result into the rows."""
        form = self._require_form()
        original = form.original
        if original is None:
            product = form.submit(self._add.handle)
        else:
            product = form.submit(lambda payload: self._submit_edit(original, payload))

        if product is not None:
            self._merge(product, replacing=original)
            self.active_form = None
        return product

    def cancel(self) -> None:
        if self.active_form is not None:
            self.active_form.cancel()
            self.active_form = None

    # --- Row actions -----------------------------------------------------------

    def delete(self, product_id: str) -> None:
        self._delete.handle(product_id)
        self.products = [p for p in self.products if p.id != product_id]

    # --- Internal helpers ------------------------------------------------------

    def _show(self, form: ProductForm) -> ProductForm:
        if self.active_form is not None:
            logger.debug("Closing the previous product dialog")
            self.active_form.cancel()
        self.active_form = form.open()
        return form

    def _submit_edit(self, original: Product, payload: ProductPayload) -> Product:
        return self._update.handle(original.id, payload)

    def _require_form(self) -> ProductForm:
        if self.active_form is None:
            raise FormClosedError("No product dialog is open")
        return self.active_form

    def _find(self, product_id: str) -> Product:
        for product in self.products:
            if product.id == product_id:
                return product
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

    def _merge(self, product: Product, replacing: Product | None) -> None:
        if replacing is None:
            self.products.insert(0, product)
            return
        for i, row in enumerate(self.products):
            if row.id == replacing.id:
                self.products[i] = product
                return
        self.products.insert(0, product)

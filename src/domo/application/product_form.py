"""Product form: the create/edit dialog behind the product list.

The form holds the live field values while an operator types or clicks
the quantity stepper, validates them on submit against the rules in
``domo.domain.validators``, and hands a single ProductPayload to the
caller's submit handler.

State machine (one instance per opened dialog)::

    IDLE --open--> EDITING --submit--> SUBMITTING --ok--> SUCCEEDED -> CLOSED
                      ^                     |
                      +-------failed--------+
    IDLE/EDITING/SUBMITTING --cancel--> CLOSED

A failed submit goes back to EDITING with ``error_message`` set and the
input untouched. CLOSED is terminal.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum
from typing import Any, Callable

from domo.application.dto import ProductPayload
from domo.domain.exceptions import (
    DomainException,
    FormClosedError,
    PermissionDenied,
    UniquenessConflict,
)
from domo.domain.model.principal import Role
from domo.domain.model.product import Product
from domo.domain.model.value_objects import Money
from domo.domain.validators import FormContext, parse_number, validate_all

logger = logging.getLogger(__name__)

NAME_NOT_UNIQUE = "Product name needs to be unique."
CANNOT_EDIT = "Cannot edit product."
CANNOT_CREATE = "Cannot create product."

FIELDS = ("name", "price", "quantity")

SubmitHandler = Callable[[ProductPayload], Product]


class FormState(Enum):
    IDLE = "IDLE"
    EDITING = "EDITING"
    SUBMITTING = "SUBMITTING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
    CLOSED = "CLOSED"


class ProductForm:
    """Create form when ``product`` is None, edit form otherwise.

    Raises RoleNotResolvedError if ``role`` is still UNKNOWN: the form
    cannot decide which rules apply before the role is known.
    """

    def __init__(self, role: Role, product: Product | None = None) -> None:
        self._context = FormContext(role=role, original=product)
        self._state = FormState.IDLE
        self._values: dict[str, Any] = {}
        self.field_errors: dict[str, str] = {}
        self.error_message: str | None = None
        self.result: Product | None = None

    # --- Lifecycle -------------------------------------------------------------

    def open(self) -> ProductForm:
        """Populate defaults from the original product and start editing."""
        if self._state is not FormState.IDLE:
            raise FormClosedError(f"Form already opened (state {self._state.value})")
        product = self._context.original
        if product is not None:
            self._values = {
                "name": product.name,
                "price": parse_number(product.price.amount),
                "quantity": Decimal(product.quantity),
            }
        else:
            self._values = {"name": "", "price": Decimal(0), "quantity": Decimal(0)}
        self._state = FormState.EDITING
        return self

    def cancel(self) -> None:
        """Drop every pending edit and close. No validation runs."""
        if self._state is FormState.CLOSED:
            return
        self._values = {}
        self.field_errors = {}
        self.error_message = None
        self._state = FormState.CLOSED

    # --- Read-only view --------------------------------------------------------

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state is FormState.SUBMITTING

    @property
    def is_edit(self) -> bool:
        return self._context.original is not None

    @property
    def original(self) -> Product | None:
        return self._context.original

    @property
    def role(self) -> Role:
        return self._context.role

    @property
    def editable_fields(self) -> tuple[str, ...]:
        if self._context.role is Role.ADMIN:
            return FIELDS
        return ("quantity",)

    @property
    def submit_label(self) -> str:
        return "Save" if self.is_edit else "Create"

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._values)

    @property
    def quantity(self) -> Decimal | None:
        return self._values.get("quantity")

    # --- Editing ---------------------------------------------------------------

    def set_field(self, name: str, raw: Any) -> None:
        """Store a typed value. Numbers that do not parse are kept as None."""
        self._require_editing()
        if name not in FIELDS:
            raise KeyError(name)
        if name not in self.editable_fields:
            raise PermissionDenied(f"Only administrators can change the {name}.")
        if name == "name":
            self._values[name] = "" if raw is None else str(raw)
        else:
            self._values[name] = parse_number(raw)

    @property
    def can_decrement(self) -> bool:
        quantity = self.quantity
        return quantity is not None and quantity > 0

    @property
    def can_increment(self) -> bool:
        if self._context.role is Role.ADMIN:
            return True
        quantity = self.quantity
        original = self._context.original
        if quantity is None:
            return False
        return original is None or quantity < original.quantity

    def decrement(self) -> None:
        self._require_editing()
        if not self.can_decrement:
            logger.debug("Decrement ignored at quantity %s", self.quantity)
            return
        self._values["quantity"] = self.quantity - 1

    def increment(self) -> None:
        self._require_editing()
        if not self.can_increment:
            logger.debug("Increment ignored at quantity %s", self.quantity)
            return
        quantity = self.quantity
        self._values["quantity"] = (Decimal(0) if quantity is None else quantity) + 1

    @property
    def quantity_delta(self) -> Decimal | None:
        """Pending change against the original quantity (edit mode only)."""
        original = self._context.original
        quantity = self.quantity
        if original is None or quantity is None or quantity == original.quantity:
            return None
        return quantity - original.quantity

    @property
    def delta_label(self) -> str | None:
        """E.g. "(+3)" or "(-2)"; None when nothing changed."""
        delta = self.quantity_delta
        if delta is None:
            return None
        return f"({delta:+})"

    # --- Submitting ------------------------------------------------------------

    def validate(self) -> dict[str, str]:
        self.field_errors = validate_all(self._values, self._context)
        return dict(self.field_errors)

    def submit(self, handler: SubmitHandler) -> Product | None:
        """Validate and pass the payload to *handler*.

        Returns the stored product on success, None otherwise; failures
        are reported through ``field_errors`` and ``error_message``.
        """
        if self._state is FormState.SUBMITTING:
            logger.debug("Submit ignored: a submission is already in flight")
            return None
        self._require_editing()

        if self.validate():
            logger.debug("Product form invalid: %s", self.field_errors)
            return None

        payload = self._payload()
        self._state = FormState.SUBMITTING
        try:
            product = handler(payload)
        except UniquenessConflict:
            return self._fail(NAME_NOT_UNIQUE)
        except DomainException as exc:
            logger.warning("Product %s failed: %s", "edit" if self.is_edit else "create", exc)
            return self._fail(CANNOT_EDIT if self.is_edit else CANNOT_CREATE)
        except Exception:
            if self._state is FormState.SUBMITTING:
                self._state = FormState.EDITING
            raise

        # The dialog may have been closed while the handler ran.
        if self._state is not FormState.SUBMITTING:
            logger.debug("Ignoring submit result for a closed form")
            return None
        self._state = FormState.SUCCEEDED
        self.error_message = None
        self.result = product
        self._state = FormState.CLOSED
        return product

    # --- Internal helpers ------------------------------------------------------

    def _payload(self) -> ProductPayload:
        return ProductPayload(
            name=self._values["name"].strip(),
            price=Money(self._values["price"]),
            quantity=int(self._values["quantity"]),
        )

    def _fail(self, message: str) -> None:
        if self._state is not FormState.SUBMITTING:
            logger.debug("Ignoring submit failure for a closed form")
            return None
        self._state = FormState.FAILED
        self.error_message = message
        self._state = FormState.EDITING
        return None

    def _require_editing(self) -> None:
        if self._state is FormState.CLOSED:
            raise FormClosedError("This form is closed")
        if self._state is not FormState.EDITING:
            raise FormClosedError(f"Form is not editable (state {self._state.value})")

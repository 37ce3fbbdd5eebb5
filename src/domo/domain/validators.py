"""Field validators for the product form.

Each rule is a pure predicate over a parsed field value and the form
context. ``PRODUCT_FORM_RULES`` declares, per field, the rules in the
order they are evaluated; the first failing rule's message is the
field's error.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from domo.domain.exceptions import RoleNotResolvedError
from domo.domain.model.principal import Role
from domo.domain.model.product import Product

MAX_QUANTITY = 2_147_483_647
MAX_PRICE = Decimal("999999999999.99")

NAME_REQUIRED = "Product name is required."
PRICE_NOT_NEGATIVE = "Price must equal or more than 0."
QUANTITY_NOT_NEGATIVE = "Quantity must equal or more than 0."
QUANTITY_WHOLE_NUMBER = "Quantity must be a whole number."
PRICE_TOO_LARGE = f"Price must equal or less than {MAX_PRICE}."
QUANTITY_TOO_LARGE = f"Quantity must equal or less than {MAX_QUANTITY}."
QUANTITY_CANNOT_INCREASE = (
    "Cannot increase quantity. Please contact an admin to do that for you."
)


@dataclass(frozen=True)
class FormContext:
    """What the rules may know besides the value: who edits, and what."""

    role: Role
    original: Product | None = None

    def __post_init__(self) -> None:
        if not self.role.is_resolved:
            raise RoleNotResolvedError("Role must be resolved before validating")

    @property
    def restricts_increase(self) -> bool:
        """The ratchet rule: non-admins editing an existing product."""
        return self.role is not Role.ADMIN and self.original is not None


@dataclass(frozen=True)
class Rule:
    name: str
    message: str
    check: Callable[[Any, FormContext], bool]


def parse_number(raw: Any) -> Decimal | None:
    """Coerce user input to a finite Decimal, or None when it is not a number.

    Whole numbers are normalised ("3.0" -> 3) so they compare and print
    like integers.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = Decimal(str(raw))
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    if value.is_zero():
        return Decimal(0)
    if value == value.to_integral_value():
        value = value.to_integral_value()
    return value


def is_present(value: Any, ctx: FormContext) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_non_negative(value: Decimal | None, ctx: FormContext) -> bool:
    return value is not None and value >= 0


def is_whole_number(value: Decimal | None, ctx: FormContext) -> bool:
    return value is not None and value == value.to_integral_value()


def is_within(limit: Decimal | int) -> Callable[[Decimal | None, FormContext], bool]:
    def check(value: Decimal | None, ctx: FormContext) -> bool:
        return value is not None and value <= limit

    return check


def is_not_above_original(value: Decimal | None, ctx: FormContext) -> bool:
    if not ctx.restricts_increase or ctx.original is None:
        return True
    return value is not None and value <= ctx.original.quantity


PRODUCT_FORM_RULES: dict[str, tuple[Rule, ...]] = {
    "name": (
        Rule("required", NAME_REQUIRED, is_present),
    ),
    "price": (
        Rule("non_negative", PRICE_NOT_NEGATIVE, is_non_negative),
        Rule("within_max", PRICE_TOO_LARGE, is_within(MAX_PRICE)),
    ),
    "quantity": (
        Rule("non_negative", QUANTITY_NOT_NEGATIVE, is_non_negative),
        Rule("whole_number", QUANTITY_WHOLE_NUMBER, is_whole_number),
        Rule("within_max", QUANTITY_TOO_LARGE, is_within(MAX_QUANTITY)),
        Rule("cannot_increment", QUANTITY_CANNOT_INCREASE, is_not_above_original),
    ),
}


def validate_field(field_name: str, value: Any, ctx: FormContext) -> str | None:
    """Return the message of the first failing rule, or None if all pass."""
    for rule in PRODUCT_FORM_RULES[field_name]:
        if not rule.check(value, ctx):
            return rule.message
    return None


def validate_all(values: dict[str, Any], ctx: FormContext) -> dict[str, str]:
    """Validate every declared field; returns only the fields that failed."""
    errors: dict[str, str] = {}
    for field_name in PRODUCT_FORM_RULES:
        message = validate_field(field_name, values.get(field_name), ctx)
        if message is not None:
            errors[field_name] = message
    return errors

"""Payload validation for product writes."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

FIELDS = ("name", "price", "quantity")


def _fits_float(value: int) -> bool:
    try:
        float(value)
    except OverflowError:
        return False
    return True


def is_number(value: Any) -> bool:
    """True for finite floats and ints that fit in a float. ``bool`` is not a number here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return _fits_float(value)
    return isinstance(value, float) and math.isfinite(value)


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return _fits_float(value)
    return isinstance(value, float) and value.is_integer()


def validate_product_payload(payload: Any, partial: bool = False) -> list[str]:
    """Collect every violation in ``payload``.

    With ``partial`` set, only the fields present in the payload are checked,
    and at least one of them has to be there.
    """
    if not isinstance(payload, Mapping):
        payload = {}
    errors: list[str] = []

    if not partial or "name" in payload:
        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append("name must be a non-empty string")

    if not partial or "price" in payload:
        price = payload.get("price")
        if not is_number(price):
            errors.append("price must be a number")
        elif price < 0:
            errors.append("price must be >= 0")

    if not partial or "quantity" in payload:
        quantity = payload.get("quantity")
        if not is_integer(quantity):
            errors.append("quantity must be an integer number")
        elif quantity < 0:
            errors.append("quantity must be >= 0")

    if partial and not any(field in payload for field in FIELDS):
        errors.append("at least one of name, price, quantity must be provided")

    return errors

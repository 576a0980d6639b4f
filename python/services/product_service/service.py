"""Product operations over an injected in-memory store."""

from __future__ import annotations

import logging
import math
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from common.models import Product, ProductBase

from product_service.store import ProductStore
from product_service.validation import is_integer, is_number, validate_product_payload

logger = logging.getLogger("products.service")

_ID_RE = re.compile(r"\s*[+-]?\d+\s*")
_CENTS = Decimal("0.01")
_NO_ROUNDING_FROM = 1e21


@dataclass
class WriteResult:
    """Outcome of create/update: a product, a list of violations, or not-found."""

    product: Product | None = None
    errors: list[str] = field(default_factory=list)
    not_found: bool = False


def parse_id(raw: Any) -> int | None:
    """Parse an id from a path segment or number. Returns None if it isn't an integer."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str) and _ID_RE.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            # longer than the interpreter's int conversion limit
            return None
    return None


def round_money(value: float) -> float:
    """Round to cents: exact binary value of the float, ties away from zero.

    Non-finite values and magnitudes of 1e21 or more are returned unchanged.
    """
    if not math.isfinite(value) or abs(value) >= _NO_ROUNDING_FROM:
        return value
    return float(Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP))


def _coerce(payload: Mapping[str, Any]) -> ProductBase:
    return ProductBase(
        name=payload["name"].strip(),
        price=payload["price"],
        quantity=payload["quantity"],
    )


class ProductsService:
    def __init__(self, store: ProductStore) -> None:
        self._store = store
        self._lock = threading.RLock()

    def list(self) -> list[Product]:
        with self._lock:
            return list(self._store.products)

    def get_by_id(self, product_id: Any) -> Product | None:
        numeric_id = parse_id(product_id)
        if numeric_id is None:
            return None
        with self._lock:
            return next((p for p in self._store.products if p.id == numeric_id), None)

    def create(self, payload: Any) -> WriteResult:
        errors = validate_product_payload(payload, partial=False)
        if errors:
            logger.debug("Rejected create: %s", errors)
            return WriteResult(errors=errors)

        # Coerce before taking an id so a failure here never burns one.
        fields = _coerce(payload)
        with self._lock:
            product = Product(id=self._store.allocate_id(), **fields.model_dump())
            self._store.products.append(product)
        logger.info("Created product id=%s", product.id)
        return WriteResult(product=product)

    def update(self, product_id: Any, payload: Any) -> WriteResult:
        """Replace name, price and quantity of an existing product (PUT semantics)."""
        with self._lock:
            existing = self.get_by_id(product_id)
            if existing is None:
                return WriteResult(not_found=True)

            errors = validate_product_payload(payload, partial=False)
            if errors:
                logger.debug("Rejected update of id=%s: %s", existing.id, errors)
                return WriteResult(errors=errors)

            fields = _coerce(payload)
            existing.name = fields.name
            existing.price = fields.price
            existing.quantity = fields.quantity
        logger.info("Updated product id=%s", existing.id)
        return WriteResult(product=existing)

    def delete(self, product_id: Any) -> bool:
        numeric_id = parse_id(product_id)
        if numeric_id is None:
            return False
        with self._lock:
            products = self._store.products
            for idx, product in enumerate(products):
                if product.id == numeric_id:
                    del products[idx]
                    logger.info("Deleted product id=%s", numeric_id)
                    return True
        return False

    def total_value(self) -> float:
        """Sum of price * quantity over all products, rounded to cents.

        Records with a non-numeric price or a non-integer quantity count as 0.
        """
        total = 0.0
        with self._lock:
            for p in self._store.products:
                price = p.price if is_number(p.price) else 0
                qty = p.quantity if is_integer(p.quantity) else 0
                total += price * qty
        return round_money(total)

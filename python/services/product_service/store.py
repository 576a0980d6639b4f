"""In-memory product store."""

from __future__ import annotations

from common.models import Product


class ProductStore:
    """Ordered product records plus the id counter. Ids are never reused."""

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.next_id = 1

    def allocate_id(self) -> int:
        product_id = self.next_id
        self.next_id += 1
        return product_id

"""Shared Pydantic models used across Python services."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class ProductBase(BaseModel):
    name: str
    price: float
    quantity: int


class Product(ProductBase):
    id: int


class BalanceData(BaseModel):
    # None when the sum overflows a float; serialized as null
    total: float | None


class ApiResponse(BaseModel):
    """Uniform response envelope. Unset ``data``/``errors`` are left out of the body."""

    status: Literal["success", "error"]
    message: str
    data: Any = None
    errors: list[str] | None = None

    def body(self) -> dict[str, Any]:
        body = self.model_dump(mode="json")
        for key in ("data", "errors"):
            if body[key] is None:
                del body[key]
        return body


class HealthResponse(BaseModel):
    status: str
    service: str

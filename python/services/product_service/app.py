"""Product Service — FastAPI application for managing products."""

from __future__ import annotations

import logging
import math
import uuid
from typing import Any

from fastapi import APIRouter, Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.log_config import configure_logging, set_request_id
from common.models import ApiResponse, BalanceData, HealthResponse

from product_service.config import Settings
from product_service.service import ProductsService
from product_service.store import ProductStore

logger = logging.getLogger("products.api")

router = APIRouter(prefix="/products", tags=["Products"])


def envelope(
    status_code: int,
    message: str,
    data: Any = None,
    errors: list[str] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    status = "success" if status_code < 400 else "error"
    body = ApiResponse(status=status, message=message, data=data, errors=errors).body()
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def not_found() -> JSONResponse:
    return envelope(404, "Product not found")


def get_service(request: Request) -> ProductsService:
    return request.app.state.products_service


@router.get("", summary="List products")
def list_products(service: ProductsService = Depends(get_service)):
    return envelope(200, "Products retrieved successfully", data=service.list())


# Must stay ahead of /{product_id} so "balance" is not taken for an id.
@router.get("/balance", summary="Get total inventory value (sum of price * quantity)")
def get_balance(service: ProductsService = Depends(get_service)):
    try:
        total = service.total_value()
    except Exception:
        logger.exception("Failed to compute total inventory value")
        return envelope(500, "Failed to compute total inventory value")
    if not math.isfinite(total):
        total = None
    return envelope(
        200, "Total inventory value computed successfully", data=BalanceData(total=total)
    )


@router.get("/{product_id}", summary="Get product by ID")
def get_product(product_id: str, service: ProductsService = Depends(get_service)):
    product = service.get_by_id(product_id)
    if product is None:
        return not_found()
    return envelope(200, "Product retrieved successfully", data=product)


@router.post("", summary="Create a product")
def create_product(
    payload: Any = Body(default=None, examples=[{"name": "Laptop", "price": 999.99, "quantity": 10}]),
    service: ProductsService = Depends(get_service),
):
    result = service.create(payload if payload is not None else {})
    if result.errors:
        return envelope(400, "Invalid product payload", errors=result.errors)
    return envelope(201, "Product created successfully", data=result.product)


@router.put("/{product_id}", summary="Update a product")
def update_product(
    product_id: str,
    payload: Any = Body(default=None),
    service: ProductsService = Depends(get_service),
):
    result = service.update(product_id, payload if payload is not None else {})
    if result.not_found:
        return not_found()
    if result.errors:
        return envelope(400, "Invalid product payload", errors=result.errors)
    return envelope(200, "Product updated successfully", data=result.product)


@router.delete("/{product_id}", summary="Delete a product")
def delete_product(product_id: str, service: ProductsService = Depends(get_service)):
    if not service.delete(product_id):
        return not_found()
    return envelope(200, "Product deleted successfully")


def create_app(
    service: ProductsService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        docs_url=settings.DOCS_URL,
        openapi_url=settings.OPENAPI_URL,
    )
    app.state.products_service = service or ProductsService(ProductStore())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def _request_id_mw(request: Request, call_next):
        rid = request.headers.get("x-request-id") or uuid.uuid4().hex
        set_request_id(rid)
        response = await call_next(request)
        response.headers["x-request-id"] = rid
        return response

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        logger.debug("Malformed request to %s: %s", request.url.path, exc.errors())
        return envelope(400, "Invalid request body")

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        return envelope(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok", service=settings.SERVICE_NAME)

    app.include_router(router)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = Settings()
    logger.info("Starting %s on %s:%s", settings.SERVICE_NAME, settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()

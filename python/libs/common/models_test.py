from common.models import ApiResponse, BalanceData, HealthResponse, Product


def test_product_model():
    product = Product(id=1, name="Widget", price=9.99, quantity=3)
    assert product.price == 9.99
    assert product.quantity == 3


def test_product_quantity_accepts_integral_float():
    product = Product(id=1, name="Widget", price=1, quantity=2.0)
    assert product.quantity == 2
    assert isinstance(product.quantity, int)


def test_envelope_omits_unset_fields():
    body = ApiResponse(status="success", message="Product deleted successfully").body()
    assert body == {"status": "success", "message": "Product deleted successfully"}


def test_envelope_keeps_empty_data_list():
    body = ApiResponse(status="success", message="ok", data=[]).body()
    assert body["data"] == []


def test_envelope_serializes_models():
    product = Product(id=1, name="Laptop", price=999.99, quantity=10)
    body = ApiResponse(status="success", message="ok", data=product).body()
    assert body["data"] == {"id": 1, "name": "Laptop", "price": 999.99, "quantity": 10}

    body = ApiResponse(status="success", message="ok", data=BalanceData(total=12.5)).body()
    assert body["data"] == {"total": 12.5}


def test_envelope_errors():
    body = ApiResponse(
        status="error", message="Invalid product payload", errors=["price must be >= 0"]
    ).body()
    assert body["errors"] == ["price must be >= 0"]
    assert "data" not in body


def test_health_response():
    health = HealthResponse(status="ok", service="test")
    assert health.status == "ok"


def test_envelope_keeps_null_total():
    body = ApiResponse(status="success", message="ok", data=BalanceData(total=None)).body()
    assert body["data"] == {"total": None}

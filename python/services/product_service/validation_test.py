import pytest

from product_service.validation import validate_product_payload

AT_LEAST_ONE = "at least one of name, price, quantity must be provided"


def test_valid_payload():
    assert validate_product_payload({"name": "Laptop", "price": 999.99, "quantity": 10}) == []


def test_empty_payload_reports_every_field_in_order():
    assert validate_product_payload({}, partial=False) == [
        "name must be a non-empty string",
        "price must be a number",
        "quantity must be an integer number",
    ]


def test_empty_partial_payload():
    assert validate_product_payload({}, partial=True) == [AT_LEAST_ONE]


def test_negative_price_only_reports_range():
    assert validate_product_payload({"name": "x", "price": -5, "quantity": 2}) == [
        "price must be >= 0"
    ]


def test_negative_quantity_only_reports_range():
    assert validate_product_payload({"name": "x", "price": 5, "quantity": -2}) == [
        "quantity must be >= 0"
    ]


@pytest.mark.parametrize("name", ["", "   ", "\t\n", None, 5, ["a"]])
def test_bad_names(name):
    errors = validate_product_payload({"name": name, "price": 1, "quantity": 1})
    assert errors == ["name must be a non-empty string"]


@pytest.mark.parametrize("price", ["10", None, True, float("nan"), float("inf"), [1]])
def test_bad_prices(price):
    errors = validate_product_payload({"name": "x", "price": price, "quantity": 1})
    assert errors == ["price must be a number"]


@pytest.mark.parametrize("quantity", [1.5, "3", None, False, float("nan")])
def test_bad_quantities(quantity):
    errors = validate_product_payload({"name": "x", "price": 1, "quantity": quantity})
    assert errors == ["quantity must be an integer number"]


def test_zero_values_are_valid():
    assert validate_product_payload({"name": "x", "price": 0, "quantity": 0}) == []


def test_integral_float_quantity_is_valid():
    assert validate_product_payload({"name": "x", "price": 1, "quantity": 3.0}) == []


def test_partial_checks_only_present_fields():
    assert validate_product_payload({"price": 3}, partial=True) == []
    assert validate_product_payload({"quantity": -1}, partial=True) == ["quantity must be >= 0"]


def test_partial_presence_not_truthiness():
    assert validate_product_payload({"name": ""}, partial=True) == [
        "name must be a non-empty string"
    ]
    assert validate_product_payload({"price": 0}, partial=True) == []


def test_partial_ignores_unknown_fields():
    assert validate_product_payload({"sku": "A-1"}, partial=True) == [AT_LEAST_ONE]


def test_all_fields_invalid():
    errors = validate_product_payload({"name": 1, "price": -1, "quantity": 0.5})
    assert errors == [
        "name must be a non-empty string",
        "price must be >= 0",
        "quantity must be an integer number",
    ]


def test_non_mapping_payload():
    assert len(validate_product_payload(["name", "price"])) == 3
    assert validate_product_payload(None, partial=True) == [AT_LEAST_ONE]


def test_ints_too_large_for_a_float():
    huge = int("1" * 400)
    assert validate_product_payload({"name": "x", "price": huge, "quantity": 1}) == [
        "price must be a number"
    ]
    assert validate_product_payload({"name": "x", "price": 1, "quantity": huge}) == [
        "quantity must be an integer number"
    ]
    assert validate_product_payload({"name": "x", "price": 10**300, "quantity": 10**300}) == []

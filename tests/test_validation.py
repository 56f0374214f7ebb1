"""Unit tests for product payload validation."""

import pytest

from product_service.exceptions import ProductValidationError
from product_service.schemas import FieldError
from product_service.validation import (
    NAME_MANDATORY,
    NAME_TOO_LONG,
    PRICE_MANDATORY,
    validate_product,
)


def _errors(payload):
    with pytest.raises(ProductValidationError) as exc_info:
        validate_product(payload)
    return exc_info.value.errors


def test_valid_payload():
    product = validate_product({"name": "Lamp", "description": "Desk lamp", "price": 19.5})
    assert product.model_dump() == {"name": "Lamp", "description": "Desk lamp", "price": 19.5}


def test_description_is_optional():
    product = validate_product({"name": "Lamp", "price": 19.5})
    assert product.description is None


def test_integer_price_is_accepted():
    assert validate_product({"name": "Lamp", "price": 20}).price == 20.0


def test_unknown_keys_are_ignored():
    product = validate_product({"id": 7, "name": "Lamp", "price": 1.0, "colour": "red"})
    assert product.model_dump() == {"name": "Lamp", "description": None, "price": 1.0}


@pytest.mark.parametrize("name", [None, "", " ", "\t\n"])
def test_blank_name(name):
    assert _errors({"name": name, "price": 1.0}) == [FieldError(field="name", message=NAME_MANDATORY)]


def test_missing_name():
    assert _errors({"price": 1.0}) == [FieldError(field="name", message=NAME_MANDATORY)]


def test_name_length_limit():
    assert validate_product({"name": "n" * 100, "price": 1.0}).name == "n" * 100
    assert _errors({"name": "n" * 101, "price": 1.0}) == [
        FieldError(field="name", message=NAME_TOO_LONG)
    ]


def test_name_too_long_message():
    assert NAME_TOO_LONG == "Name should not exceed 100 characters"


@pytest.mark.parametrize("payload", [{"name": "Lamp"}, {"name": "Lamp", "price": None}])
def test_missing_price(payload):
    assert _errors(payload) == [FieldError(field="price", message=PRICE_MANDATORY)]


def test_all_violations_reported_in_field_order():
    assert _errors({"name": "  "}) == [
        FieldError(field="name", message=NAME_MANDATORY),
        FieldError(field="price", message=PRICE_MANDATORY),
    ]


def test_type_errors_are_reported_per_field():
    errors = _errors({"name": "", "price": "expensive"})
    assert errors[0] == FieldError(field="name", message=NAME_MANDATORY)
    assert [e.field for e in errors] == ["name", "price"]


def test_non_string_name():
    assert [e.field for e in _errors({"name": 123, "price": 1.0})] == ["name"]


def test_non_finite_price():
    assert [e.field for e in _errors({"name": "Lamp", "price": float("inf")})] == ["price"]


def test_non_mapping_payload():
    assert [e.field for e in _errors(["Lamp", 1.0])] == ["body"]


def test_validation_error_message():
    with pytest.raises(ProductValidationError, match="price: Price is mandatory"):
        validate_product({"name": "Lamp"})


@pytest.mark.parametrize("price", [True, False, "9.99"])
def test_price_must_be_a_number(price):
    assert [e.field for e in _errors({"name": "Lamp", "price": price})] == ["price"]

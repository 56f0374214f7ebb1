"""
Custom exceptions for the Product Service.
"""

from typing import List

from .schemas import FieldError


class ProductServiceError(Exception):
    """Base class for exceptions raised by the Product Service."""
    pass


class ProductValidationError(ProductServiceError):
    """A product payload failed one or more field constraints."""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))


class ProductNotFoundError(ProductServiceError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID: {product_id} not found")


class StoreError(ProductServiceError):
    """The database failed while reading or writing a product."""
    pass

# product_service/repository.py

"""
Data-access layer for products.

Every write is a single-row commit. Database failures are rolled back, logged
and re-raised as `StoreError`; nothing is retried here.
"""

import logging
from typing import List, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .exceptions import ProductNotFoundError, StoreError
from .models import Product
from .schemas import ProductPayload

logger = logging.getLogger(__name__)


class ProductGateway(Protocol):
    def list_all(self) -> List[Product]: ...

    def get_by_id(self, product_id: int) -> Product: ...

    def create(self, payload: ProductPayload) -> Product: ...

    def update(self, product_id: int, payload: ProductPayload) -> Product: ...

    def delete(self, product_id: int) -> None: ...


class ProductRepository:
    """SQLAlchemy-backed `ProductGateway`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> List[Product]:
        products = self._session.query(Product).order_by(Product.id).all()
        logger.info(f"Retrieved {len(products)} products.")
        return products

    def get_by_id(self, product_id: int) -> Product:
        product = self._session.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def create(self, payload: ProductPayload) -> Product:
        product = Product(**payload.model_dump())
        self._commit(product, "Could not create product.")
        logger.info(f"Product '{product.name}' (ID: {product.id}) created successfully.")
        return product

    def update(self, product_id: int, payload: ProductPayload) -> Product:
        product = self.get_by_id(product_id)
        # Full replace: fields missing from the payload are reset, not kept.
        for field, value in payload.model_dump().items():
            setattr(product, field, value)
        self._commit(product, f"Could not update product {product_id}.")
        logger.info(f"Product '{product.name}' (ID: {product_id}) updated successfully.")
        return product

    def delete(self, product_id: int) -> None:
        product = self.get_by_id(product_id)
        try:
            self._session.delete(product)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(f"Error deleting product {product_id}: {e}", exc_info=True)
            raise StoreError("An error occurred while deleting the product.") from e
        logger.info(f"Product (ID: {product_id}) deleted successfully.")

    def _commit(self, product: Product, failure_message: str) -> None:
        try:
            self._session.add(product)
            self._session.commit()
            self._session.refresh(product)
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(f"{failure_message} {e}", exc_info=True)
            raise StoreError(failure_message) from e

# product_service/routes.py

"""
HTTP handlers for the /products resource.

Handlers are plain functions; `ROUTES` maps each (method, path) pair onto one
of them and `build_router` registers the table on an `APIRouter`. Request
bodies are received as raw JSON objects and passed through `validate_product`
before the repository is called.
"""

import logging
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from fastapi import APIRouter, Body, Depends, Path, Response, status
from sqlalchemy.orm import Session

from .db import get_db
from .repository import ProductGateway, ProductRepository
from .schemas import ErrorMessage, ProductResponse, ValidationErrorMessage
from .validation import validate_product

logger = logging.getLogger(__name__)

# Ids are stored as signed 64-bit integers
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


def get_repository(db: Session = Depends(get_db)) -> ProductGateway:
    return ProductRepository(db)


CREATE_EXAMPLES = {
    "sample": {
        "summary": "A new product",
        "value": {
            "name": "Sample Product",
            "description": "This is a sample product",
            "price": 99.99,
        },
    }
}

UPDATE_EXAMPLES = {
    "updated": {
        "summary": "Replacement product details",
        "value": {
            "name": "Updated Product",
            "description": "This product has been updated",
            "price": 199.99,
        },
    }
}


# -----------------------------
# Handlers
# -----------------------------


def list_products(repository: ProductGateway = Depends(get_repository)):
    logger.info("Listing all products")
    return repository.list_all()


def get_product(
    product_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    repository: ProductGateway = Depends(get_repository),
):
    logger.info(f"Fetching product with ID: {product_id}")
    return repository.get_by_id(product_id)


def create_product(
    payload: Dict[str, Any] = Body(..., openapi_examples=CREATE_EXAMPLES),
    repository: ProductGateway = Depends(get_repository),
):
    product = validate_product(payload)
    logger.info(f"Creating product: {product.name}")
    return repository.create(product)


def update_product(
    product_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    payload: Dict[str, Any] = Body(..., openapi_examples=UPDATE_EXAMPLES),
    repository: ProductGateway = Depends(get_repository),
):
    product = validate_product(payload)
    logger.info(f"Updating product with ID: {product_id} with data: {product.model_dump()}")
    return repository.update(product_id, product)


def delete_product(
    product_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    repository: ProductGateway = Depends(get_repository),
):
    logger.info(f"Attempting to delete product with ID: {product_id}")
    repository.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# -----------------------------
# Routing table
# -----------------------------


class Route(NamedTuple):
    method: str
    path: str
    endpoint: Callable[..., Any]
    status_code: int
    summary: str
    description: str
    response_model: Optional[Any] = None
    responses: Optional[Dict[int, Dict[str, Any]]] = None


NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorMessage, "description": "Product not found"}}
INVALID = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ValidationErrorMessage,
        "description": "Invalid product data",
    }
}

ROUTES = (
    Route(
        "GET",
        "",
        list_products,
        status.HTTP_200_OK,
        "Retrieve all products",
        "Fetch a list of all available products from the database.",
        response_model=List[ProductResponse],
    ),
    Route(
        "GET",
        "/{product_id}",
        get_product,
        status.HTTP_200_OK,
        "Retrieve a product by ID",
        "Fetch a single product by its unique identifier.",
        response_model=ProductResponse,
        responses=NOT_FOUND,
    ),
    Route(
        "POST",
        "",
        create_product,
        status.HTTP_201_CREATED,
        "Create a new product",
        "Add a new product to the database. Ensure that the name and price fields are valid.",
        response_model=ProductResponse,
        responses=INVALID,
    ),
    Route(
        "PUT",
        "/{product_id}",
        update_product,
        status.HTTP_200_OK,
        "Update an existing product",
        "Replace the details of an existing product by its unique identifier.",
        response_model=ProductResponse,
        responses={**NOT_FOUND, **INVALID},
    ),
    Route(
        "DELETE",
        "/{product_id}",
        delete_product,
        status.HTTP_204_NO_CONTENT,
        "Delete a product",
        "Remove a product from the database by its unique identifier.",
        responses=NOT_FOUND,
    ),
)


def build_router() -> APIRouter:
    router = APIRouter(prefix="/products", tags=["Product API"])
    for route in ROUTES:
        router.add_api_route(
            route.path,
            route.endpoint,
            methods=[route.method],
            status_code=route.status_code,
            response_model=route.response_model,
            summary=route.summary,
            description=route.description,
            responses=route.responses,
        )
    return router

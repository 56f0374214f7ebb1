# product_service/main.py

"""
FastAPI Product Service API.
Manages product information: creation, retrieval, full replacement and
deletion of products stored in a single relational table.
"""
import logging
import os
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from .db import build_engine, build_session_factory, init_db
from .exceptions import ProductNotFoundError, ProductValidationError, StoreError
from .routes import build_router
from .schemas import FieldError, ValidationErrorMessage

# -----------------------------
# Configure Logging
# -----------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]


def _validation_response(errors) -> JSONResponse:
    body = ValidationErrorMessage(detail="Validation failed", errors=errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump()
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map service exceptions onto HTTP status codes."""

    @app.exception_handler(ProductValidationError)
    async def product_validation_handler(request: Request, exc: ProductValidationError):
        logger.warning(f"Rejected product payload on {request.url.path}: {exc}")
        return _validation_response(exc.errors)

    # Malformed JSON, non-object bodies and bad path ids are client errors too.
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = []
        for err in exc.errors():
            loc = err.get("loc") or ("body",)
            # Integer parts are list indexes or JSON decode offsets
            field = ".".join(part for part in loc[1:] if isinstance(part, str)) or str(loc[0])
            errors.append(FieldError(field=field, message=err.get("msg", "Invalid value")))
        logger.warning(f"Rejected request on {request.url.path}: {errors}")
        return _validation_response(errors)

    @app.exception_handler(ProductNotFoundError)
    async def not_found_handler(request: Request, exc: ProductNotFoundError):
        logger.warning(f"{exc}.")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Product not found"},
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """
    Builds the FastAPI application around a database engine.

    When no engine is given one is created from DATABASE_URL. The engine and
    its session factory live on `app.state`; request handlers get a session
    through the `get_db` dependency.
    """
    if engine is None:
        engine = build_engine()

    app = FastAPI(
        title="Product Service API",
        description="API for managing product resources including CRUD operations",
        version="1.0.0",
    )
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # --- FastAPI Event Handlers ---
    @app.on_event("startup")
    async def startup_event():
        """
        Ensures database tables are created (if not exist), retrying while
        the database is unreachable.
        """
        init_db(app.state.engine)

    # --- Root Endpoint ---
    @app.get("/", status_code=status.HTTP_200_OK, summary="Root endpoint")
    async def read_root():
        """
        Returns a welcome message for the Product Service.
        """
        return {"message": "Welcome to the Product Service!"}

    # --- Health Check Endpoint ---
    @app.get("/health", status_code=status.HTTP_200_OK, summary="Health check endpoint")
    async def health_check():
        """
        A simple health check endpoint to verify the service is running.
        """
        return {"status": "ok", "service": "product-service"}

    app.include_router(build_router())

    return app


app = create_app()


def run() -> None:
    """Serves the application with uvicorn on HOST:PORT."""
    logger.info(f"Starting Product Service on {HOST}:{PORT}")
    uvicorn.run("product_service.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()

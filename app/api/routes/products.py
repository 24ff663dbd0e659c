"""Product CRUD endpoints. Writes require a bearer token; reads are public."""

import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import CurrentUserId, get_product_store
from app.core.errors import NotFoundError
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductOut,
    ProductResponse,
    ProductUpdate,
)
from app.services.product_store import ProductStore

logger = logging.getLogger(__name__)
router = APIRouter()

PRODUCT_NOT_FOUND = "Product not found"

_errors = {500: {"model": ErrorResponse, "description": "Internal server error"}}
_invalid = {400: {"model": ErrorResponse, "description": "Invalid input"}}
_missing = {404: {"model": ErrorResponse, "description": PRODUCT_NOT_FOUND}}
_unauthenticated = {401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"}}


@router.post(
    "",
    response_model=ProductResponse,
    responses={**_invalid, **_unauthenticated, **_errors},
)
def create_product(
    body: ProductCreate,
    store: Annotated[ProductStore, Depends(get_product_store)],
    user_id: CurrentUserId,
) -> ProductResponse:
    """Create a new product."""
    product = store.create(body.model_dump())
    logger.info("Product created", extra={"product_id": str(product.id), "user_id": str(user_id)})
    return ProductResponse(data=ProductOut.model_validate(product))


@router.get("", response_model=ProductListResponse, responses=_errors)
def get_products(
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> ProductListResponse:
    """Get all products."""
    return ProductListResponse(data=[ProductOut.model_validate(p) for p in store.list()])


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**_missing, **_errors},
)
def get_product(
    product_id: uuid.UUID,
    store: Annotated[ProductStore, Depends(get_product_store)],
) -> ProductResponse:
    """Get a specific product by ID."""
    product = store.get(product_id)
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return ProductResponse(data=ProductOut.model_validate(product))


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**_invalid, **_unauthenticated, **_missing, **_errors},
)
def update_product(
    product_id: uuid.UUID,
    body: ProductUpdate,
    store: Annotated[ProductStore, Depends(get_product_store)],
    user_id: CurrentUserId,
) -> ProductResponse:
    """Update a product; omitted fields are left unchanged."""
    product = store.update(product_id, body.model_dump(exclude_none=True))
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    logger.info("Product updated", extra={"product_id": str(product_id), "user_id": str(user_id)})
    return ProductResponse(data=ProductOut.model_validate(product))


@router.delete(
    "/{product_id}",
    response_model=MessageResponse,
    responses={**_unauthenticated, **_missing, **_errors},
)
def delete_product(
    product_id: uuid.UUID,
    store: Annotated[ProductStore, Depends(get_product_store)],
    user_id: CurrentUserId,
) -> MessageResponse:
    """Delete a product."""
    if not store.delete(product_id):
        raise NotFoundError(PRODUCT_NOT_FOUND)
    logger.info("Product deleted", extra={"product_id": str(product_id), "user_id": str(user_id)})
    return MessageResponse(message="Product deleted successfully")

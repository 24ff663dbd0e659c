"""Pydantic request/response schemas."""

from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserPublic,
)
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.product import (
    ProductCreate,
    ProductListResponse,
    ProductOut,
    ProductResponse,
    ProductUpdate,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProductCreate",
    "ProductListResponse",
    "ProductOut",
    "ProductResponse",
    "ProductUpdate",
    "RegisterRequest",
    "RegisterResponse",
    "UserPublic",
]

"""Registration and login endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_auth_service
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisteredUser,
    RegisterRequest,
    RegisterResponse,
    UserPublic,
)
from app.schemas.common import ErrorResponse
from app.services.auth import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse},
    },
)
def register(
    body: RegisterRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> RegisterResponse:
    """Create an account with role 'user'. Returns the stored user without its password hash."""
    user = auth.register(body.email, body.password, body.full_name)
    return RegisterResponse(data=RegisteredUser(user=UserPublic.model_validate(user)))


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid email or password"},
        500: {"model": ErrorResponse},
    },
)
def login(
    body: LoginRequest,
    auth: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """
    Authenticate with email and password; returns a JWT valid for 24 hours.
    Include the token in the Authorization header as: Bearer <token>
    """
    return LoginResponse(token=auth.login(body.email, body.password))

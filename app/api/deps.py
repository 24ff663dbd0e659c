"""
FastAPI dependencies.

Collaborators are built once in `create_app` and stored on `app.state`; these
functions hand them to route handlers so nothing reads ambient globals.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.database import get_db
from app.core.security import TokenService
from app.services.auth import AuthService, authenticate_request
from app.services.product_store import ProductStore
from app.services.user_store import UserStore

# Missing or non-bearer headers arrive as None; authenticate_request raises the 401.
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    return UserStore(db)


def get_product_store(db: Annotated[Session, Depends(get_db)]) -> ProductStore:
    return ProductStore(db)


def get_auth_service(
    users: Annotated[UserStore, Depends(get_user_store)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    return AuthService(users, tokens)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> uuid.UUID:
    """Dependency: require a valid Bearer JWT and return its user id. Raises 401 otherwise."""
    return authenticate_request(credentials, tokens)


CurrentUserId = Annotated[uuid.UUID, Depends(get_current_user_id)]

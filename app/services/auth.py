"""Registration, login and bearer-token request authentication."""

import logging
import uuid
from datetime import UTC, datetime

from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import (
    DuplicateEmailError,
    InternalError,
    InvalidCredentialsError,
    UnauthenticatedError,
)
from app.core.security import (
    HashingError,
    TokenService,
    TokenSigningError,
    TokenVerificationError,
    hash_password,
    verify_password,
)
from app.models import User
from app.models.user import DEFAULT_ROLE
from app.services.user_store import UniquenessConflict, UserStore

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"
MISSING_TOKEN_MESSAGE = "No valid auth token found"
INVALID_TOKEN_MESSAGE = "Invalid token"


class AuthService:
    """Composes the credential store, password hasher and token service."""

    def __init__(self, users: UserStore, tokens: TokenService) -> None:
        self._users = users
        self._tokens = tokens

    def register(
        self,
        email: str,
        password: str,
        full_name: str,
        role: str = DEFAULT_ROLE,
    ) -> User:
        """
        Hash the password and insert a new user in a single insert. HTTP
        registration always uses the default role.

        There is no existence pre-check: a duplicate email is detected from the
        store's unique constraint at insert time.
        """
        try:
            password_hash = hash_password(password)
        except HashingError as e:
            logger.error("Password hashing failed during registration", exc_info=e)
            raise InternalError("Failed to hash password") from e

        now = datetime.now(UTC)
        user = User(
            id=uuid.uuid4(),
            email=email,
            password_hash=password_hash,
            full_name=full_name,
            role=role,
            created_at=now,
            updated_at=now,
        )
        try:
            created = self._users.insert(user)
        except UniquenessConflict as e:
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmailError() from e
        except SQLAlchemyError as e:
            logger.exception("User insert failed")
            raise InternalError() from e

        logger.info("User registered", extra={"user_id": str(created.id)})
        return created

    def login(self, email: str, password: str, now: datetime | None = None) -> str:
        """
        Verify credentials and return a signed access token.

        Unknown email and wrong password raise the same InvalidCredentialsError.
        """
        try:
            user = self._users.find_by_email(email)
        except SQLAlchemyError as e:
            logger.exception("User lookup failed")
            raise InternalError() from e

        if user is None:
            raise InvalidCredentialsError()

        try:
            valid = verify_password(password, user.password_hash)
        except HashingError as e:
            # Unusable stored hash: never a login, never reported as bad credentials.
            logger.error("Stored password hash is malformed", extra={"user_id": str(user.id)})
            raise InternalError() from e
        if not valid:
            raise InvalidCredentialsError()

        try:
            token = self._tokens.issue(str(user.id), now=now)
        except TokenSigningError as e:
            logger.exception("Token signing failed")
            raise InternalError("Failed to create token") from e

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return token


def authenticate_request(
    credentials: HTTPAuthorizationCredentials | None,
    tokens: TokenService,
    now: datetime | None = None,
) -> uuid.UUID:
    """
    Resolve the user id from the parsed `Authorization: Bearer <token>` header.

    Identity only; no permission decision is made here. Every failure raises
    UnauthenticatedError.
    """
    if credentials is None or credentials.scheme != BEARER_SCHEME:
        raise UnauthenticatedError(MISSING_TOKEN_MESSAGE)
    token = credentials.credentials
    if not token or token != token.strip():
        raise UnauthenticatedError(MISSING_TOKEN_MESSAGE)

    try:
        subject = tokens.verify(token, now=now)
    except TokenVerificationError as e:
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE) from e

    try:
        return uuid.UUID(subject)
    except ValueError as e:
        raise UnauthenticatedError(INVALID_TOKEN_MESSAGE) from e

"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

# Bcrypt cost (rounds); fixed, stored in every hash so verification follows the hash.
BCRYPT_ROUNDS = 12
# bcrypt only looks at the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72

TOKEN_TTL = timedelta(hours=24)
REQUIRED_CLAIMS = ("sub", "iat", "exp")


class HashingError(Exception):
    """Raised when bcrypt cannot hash, or a stored hash cannot be parsed."""


class TokenSigningError(Exception):
    """Raised when a token cannot be encoded."""


class TokenVerificationError(Exception):
    """
    Raised for any token that must not be trusted: malformed, bad signature,
    missing claims or expired. Deliberately a single type.
    """


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    try:
        hashed = bcrypt.hashpw(
            _password_bytes(plain_password),
            bcrypt.gensalt(rounds=BCRYPT_ROUNDS),
        )
    except (ValueError, TypeError) as e:
        raise HashingError("bcrypt failed to hash password") from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """
    Verify a plain password against a stored hash (constant-time comparison).
    Raises HashingError if the stored hash is malformed.
    """
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError) as e:
        raise HashingError("stored password hash is malformed") from e


def _epoch_seconds(moment: datetime | None) -> int:
    return int((moment or datetime.now(UTC)).timestamp())


class TokenService:
    """
    Issues and verifies signed, time-bounded bearer tokens.

    Constructed once at startup from the configured secret; stateless after that.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = TOKEN_TTL,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl_seconds = int(ttl.total_seconds())

    def issue(self, subject: str, now: datetime | None = None) -> str:
        """Create a JWT with sub, iat and exp (iat + 24h) as integer epoch seconds."""
        issued_at = _epoch_seconds(now)
        payload: dict[str, Any] = {
            "sub": str(subject),
            "iat": issued_at,
            "exp": issued_at + self._ttl_seconds,
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenSigningError("failed to encode token") from e

    def verify(self, token: str, now: datetime | None = None) -> str:
        """
        Check signature and expiry against `now`; return the subject claim.
        Raises TokenVerificationError on any failure, without saying which.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                # Time checks are done below against the caller's clock.
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "verify_nbf": False,
                    "require": list(REQUIRED_CLAIMS),
                },
            )
        except jwt.PyJWTError as e:
            raise TokenVerificationError() from e

        exp = payload.get("exp")
        sub = payload.get("sub")
        if not isinstance(exp, int) or isinstance(exp, bool):
            raise TokenVerificationError()
        if _epoch_seconds(now) >= exp:
            raise TokenVerificationError()
        if not isinstance(sub, str) or not sub:
            raise TokenVerificationError()
        return sub

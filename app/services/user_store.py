"""Credential store: user lookup and insert with uniqueness-conflict detection."""

import uuid

from psycopg2 import errorcodes
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import User


class UniquenessConflict(Exception):
    """Raised when an insert is rejected by a unique constraint."""

    def __init__(self, constraint: str | None = None) -> None:
        self.constraint = constraint
        super().__init__(f"unique constraint violated: {constraint or 'unknown'}")


def _is_unique_violation(exc: IntegrityError) -> bool:
    """True if the driver reported SQLSTATE 23505 (unique_violation)."""
    return getattr(exc.orig, "pgcode", None) == errorcodes.UNIQUE_VIOLATION


def _constraint_name(exc: IntegrityError) -> str | None:
    diag = getattr(exc.orig, "diag", None)
    return getattr(diag, "constraint_name", None)


class UserStore:
    """Data access for the users table over one request-scoped session."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_email(self, email: str) -> User | None:
        """Exact, case-sensitive match on email."""
        return self._db.query(User).filter(User.email == email).first()

    def get(self, user_id: uuid.UUID) -> User | None:
        return self._db.get(User, user_id)

    def insert(self, user: User) -> User:
        """
        Insert and commit. Uniqueness is enforced by the database at insert time;
        a violation raises UniquenessConflict. Other errors propagate after rollback.
        """
        self._db.add(user)
        try:
            self._db.commit()
        except IntegrityError as e:
            self._db.rollback()
            if _is_unique_violation(e):
                raise UniquenessConflict(_constraint_name(e)) from e
            raise
        except Exception:
            self._db.rollback()
            raise
        self._db.refresh(user)
        return user

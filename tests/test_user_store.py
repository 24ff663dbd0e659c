"""Unit tests for app.services.user_store: structured uniqueness-conflict detection."""

import unittest
import uuid
from datetime import UTC, datetime
from unittest.mock import MagicMock

from psycopg2 import errorcodes
from sqlalchemy.exc import IntegrityError, OperationalError

from app.models import User
from app.services.user_store import UniquenessConflict, UserStore


def _integrity_error(pgcode: str, constraint: str | None = None) -> IntegrityError:
    orig = MagicMock()
    orig.pgcode = pgcode
    orig.diag.constraint_name = constraint
    return IntegrityError("INSERT INTO users ...", {}, orig)


def _user() -> User:
    now = datetime.now(UTC)
    return User(
        id=uuid.uuid4(),
        email="a@b.com",
        password_hash="$2b$12$hash",
        full_name="A B",
        role="user",
        created_at=now,
        updated_at=now,
    )


class TestInsert(unittest.TestCase):
    def test_success_commits_and_returns_user(self) -> None:
        session = MagicMock()
        user = _user()
        self.assertIs(UserStore(session).insert(user), user)
        session.add.assert_called_once_with(user)
        session.commit.assert_called_once()
        session.refresh.assert_called_once_with(user)
        session.rollback.assert_not_called()

    def test_unique_violation_raises_conflict(self) -> None:
        session = MagicMock()
        session.commit.side_effect = _integrity_error(errorcodes.UNIQUE_VIOLATION, "ix_users_email")
        with self.assertRaises(UniquenessConflict) as ctx:
            UserStore(session).insert(_user())
        self.assertEqual(ctx.exception.constraint, "ix_users_email")
        session.rollback.assert_called_once()

    def test_other_integrity_error_propagates(self) -> None:
        session = MagicMock()
        session.commit.side_effect = _integrity_error(errorcodes.NOT_NULL_VIOLATION)
        with self.assertRaises(IntegrityError):
            UserStore(session).insert(_user())
        session.rollback.assert_called_once()

    def test_unique_message_without_sqlstate_is_not_a_conflict(self) -> None:
        session = MagicMock()
        orig = Exception("duplicate key value violates unique constraint")
        session.commit.side_effect = IntegrityError("INSERT", {}, orig)
        with self.assertRaises(IntegrityError):
            UserStore(session).insert(_user())

    def test_connection_error_propagates_after_rollback(self) -> None:
        session = MagicMock()
        session.commit.side_effect = OperationalError("INSERT", {}, Exception("down"))
        with self.assertRaises(OperationalError):
            UserStore(session).insert(_user())
        session.rollback.assert_called_once()


class TestFindByEmail(unittest.TestCase):
    def test_filters_and_returns_first(self) -> None:
        session = MagicMock()
        user = _user()
        session.query.return_value.filter.return_value.first.return_value = user
        self.assertIs(UserStore(session).find_by_email("a@b.com"), user)
        session.query.assert_called_once_with(User)

    def test_returns_none_when_missing(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.first.return_value = None
        self.assertIsNone(UserStore(session).find_by_email("x@y.com"))


if __name__ == "__main__":
    unittest.main()

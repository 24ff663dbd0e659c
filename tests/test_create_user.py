"""Tests for the create_user CLI: same registration path as the HTTP endpoint."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import MagicMock, patch

from app.scripts import create_user
from support import InMemoryUserStore


@patch("app.core.security.BCRYPT_ROUNDS", 4)
class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        self.store = InMemoryUserStore()
        self.session = MagicMock()
        patches = [
            patch.object(create_user, "UserStore", return_value=self.store),
            patch.object(create_user, "create_db_engine", return_value=MagicMock()),
            patch.object(create_user, "create_session_factory", return_value=lambda: self.session),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_creates_user(self) -> None:
        code, out, _ = self.run_cli("a@b.com", "secret1", "A B")
        self.assertEqual(code, 0)
        self.assertIn("a@b.com", out)
        self.assertEqual(self.store.users["a@b.com"].role, "user")
        self.session.close.assert_called_once()

    def test_creates_admin(self) -> None:
        code, _, _ = self.run_cli("admin@b.com", "secret1", "Site Admin", "admin")
        self.assertEqual(code, 0)
        self.assertEqual(self.store.users["admin@b.com"].role, "admin")
        # The role goes in with the insert; no follow-up update.
        self.session.commit.assert_not_called()

    def test_duplicate_email_fails(self) -> None:
        self.assertEqual(self.run_cli("a@b.com", "secret1", "A B")[0], 0)
        code, _, err = self.run_cli("a@b.com", "secret2", "A B")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)

    def test_invalid_input_fails_before_touching_database(self) -> None:
        code, _, err = self.run_cli("not-an-email", "secret1", "A B")
        self.assertEqual(code, 1)
        self.assertIn("email", err)
        self.assertEqual(self.store.users, {})


if __name__ == "__main__":
    unittest.main()

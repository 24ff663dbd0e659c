"""HTTP tests for /api/health and the app-level wiring (docs, unknown routes)."""

import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.database import get_db
from app.main import create_app
from support import make_settings


class TestHealth(unittest.TestCase):
    def setUp(self) -> None:
        self.session = MagicMock()
        self.app = create_app(make_settings())
        self.app.dependency_overrides[get_db] = lambda: self.session
        self.client = TestClient(self.app)

    def test_connected(self) -> None:
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"status": "ok", "environment": "dev", "database": "connected"},
        )

    def test_disconnected(self) -> None:
        self.session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["database"], "disconnected")

    def test_openapi_document_is_served(self) -> None:
        response = self.client.get("/api-docs/openapi.json")
        self.assertEqual(response.status_code, 200)
        paths = response.json()["paths"]
        self.assertIn("/api/auth/register", paths)
        self.assertIn("/api/auth/login", paths)
        self.assertIn("/api/products/{product_id}", paths)

    def test_unknown_route_uses_error_envelope(self) -> None:
        response = self.client.get("/api/nope")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["status"], "error")


class TestDatabaseSession(unittest.TestCase):
    def test_session_closed_after_request(self) -> None:
        app = create_app(make_settings())
        session = MagicMock()
        app.state.session_factory = MagicMock(return_value=session)
        TestClient(app).get("/api/health")
        session.close.assert_called_once()



class TestAccessLog(unittest.TestCase):
    def setUp(self) -> None:
        self.app = create_app(make_settings())

        @self.app.get("/boom")
        def boom() -> None:
            raise RuntimeError("kaboom")

        self.client = TestClient(self.app, raise_server_exceptions=False)

    def test_unhandled_error_is_logged_as_500(self) -> None:
        with self.assertLogs("app.access", level="INFO") as logs:
            response = self.client.get("/boom")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"status": "error", "message": "Something went wrong"})
        self.assertTrue(any("GET /boom 500" in line for line in logs.output))

    def test_handled_response_logs_its_status(self) -> None:
        with self.assertLogs("app.access", level="INFO") as logs:
            self.client.get("/api/nope")
        self.assertTrue(any("GET /api/nope 404" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()

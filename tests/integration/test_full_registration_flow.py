"""
Integration tests for the full registration flow.

These tests require a running backend and database.
Run with: pytest -m integration tests/integration/

Requires:
- Backend running at BACKEND_URL (default: http://localhost:8000)
- MongoDB reachable by the backend
"""
import time

import httpx
import pytest

pytestmark = pytest.mark.integration


class TestFullRegistrationFlow:
    """End-to-end tests for the user workflow."""

    @pytest.fixture(autouse=True)
    def setup(self, live_backend_url, test_timeout):
        """Set up test with a unique user."""
        self.base_url = live_backend_url
        self.timeout = test_timeout
        suffix = int(time.time() * 1000)
        self.user = {
            "fullName": "Integration Test",
            "username": f"integration_{suffix}",
            "email": f"integration_{suffix}@example.com",
            "password": "TestPassword123",
        }

    def _post(self, path: str, body: dict) -> httpx.Response:
        return httpx.post(f"{self.base_url}{path}", json=body, timeout=self.timeout)

    def test_health_check(self):
        """Backend health endpoint should respond."""
        try:
            response = httpx.get(f"{self.base_url}/health", timeout=self.timeout)
        except httpx.ConnectError:
            pytest.skip("Backend not running")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_register_login_and_fetch(self):
        """Register, log in, then fetch the account with its own token."""
        try:
            registered = self._post("/api/users/register", self.user)
        except httpx.ConnectError:
            pytest.skip("Backend not running")

        assert registered.status_code == 201
        user_id = registered.json()["data"]["user"]["id"]

        login = self._post("/api/users/login", {
            "email": self.user["email"],
            "password": self.user["password"],
        })
        assert login.status_code == 200
        token = login.json()["data"]["token"]

        me = httpx.get(
            f"{self.base_url}/api/users/me",
            headers={"Authorization": f"Bearer {token}"},
            timeout=self.timeout,
        )
        assert me.status_code == 200
        assert me.json()["data"]["id"] == user_id

        duplicate = self._post("/api/users/register", self.user)
        assert duplicate.status_code == 409

    def test_unknown_email_is_rejected(self):
        try:
            response = self._post("/api/users/login", {
                "email": "missing@x.com",
                "password": "whatever",
            })
        except httpx.ConnectError:
            pytest.skip("Backend not running")

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Invalid credentials"}

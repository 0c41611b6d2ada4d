#!/usr/bin/env python3
"""
API Smoke Test

Black-box walk through a running deployment: health, register, login, list,
fetch by id, token payload, validation failure and duplicate registration.
Each step logs a pass/fail line; the exit status is 1 if any step failed.

Usage:
    python scripts/smoke_test_api.py [BASE_URL]

Environment Variables:
    API_BASE_URL: Used when BASE_URL is not given (default: http://localhost:8000)
"""
import logging
import os
import sys
import time
from typing import Any, Callable

import httpx
from jose import jwt

logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
logger = logging.getLogger("smoke_test_api")

DEFAULT_BASE_URL = "http://localhost:8000"


def decode_payload(token: str) -> dict[str, Any]:
    """Read the claims of a JWT without verifying it."""
    return jwt.get_unverified_claims(token)


class SmokeTest:
    """Runs the steps in order, sharing state between them."""

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.client = httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)
        suffix = int(time.time())
        self.user = {
            "fullName": "Smoke Test",
            "username": f"smoke_{suffix}",
            "email": f"smoke_{suffix}@example.com",
            "password": "SecurePass123",
        }
        self.user_id: str | None = None
        self.token: str | None = None

    def close(self) -> None:
        self.client.close()

    def expect(self, response: httpx.Response, status: int) -> dict[str, Any]:
        if response.status_code != status:
            raise AssertionError(f"expected HTTP {status}, got {response.status_code}: {response.text}")
        return response.json()

    def health(self) -> None:
        data = self.expect(self.client.get("/health"), 200)
        logger.info("Health: %s", data.get("status"))

    def register(self) -> None:
        data = self.expect(self.client.post("/api/users/register", json=self.user), 201)
        self.user_id = data["data"]["user"]["id"]
        self.token = data["data"]["token"]
        logger.info("Registered user %s", self.user_id)

    def login(self) -> None:
        body = {"email": self.user["email"], "password": self.user["password"]}
        data = self.expect(self.client.post("/api/users/login", json=body), 200)
        if data["data"]["user"]["id"] != self.user_id:
            raise AssertionError("login returned a different user")

    def list_users(self) -> None:
        data = self.expect(self.client.get("/api/users"), 200)
        logger.info("Found %d users", data["count"])

    def get_user(self) -> None:
        data = self.expect(self.client.get(f"/api/users/{self.user_id}"), 200)
        logger.info("Retrieved user: %s", data["data"]["fullName"])

    def token_payload(self) -> None:
        claims = decode_payload(self.token)
        if claims.get("email") != self.user["email"] or claims.get("role") != "user":
            raise AssertionError(f"unexpected claims: {claims}")

    def invalid_registration(self) -> None:
        body = {"fullName": "Test", "username": "test", "email": "invalid-email", "password": "weak"}
        data = self.expect(self.client.post("/api/users/register", json=body), 400)
        logger.info("Validation errors: %d", len(data.get("errors", [])))

    def duplicate_registration(self) -> None:
        self.expect(self.client.post("/api/users/register", json=self.user), 409)

    def steps(self) -> list[tuple[str, Callable[[], None]]]:
        return [
            ("health check", self.health),
            ("user registration", self.register),
            ("user login", self.login),
            ("list users", self.list_users),
            ("get user by id", self.get_user),
            ("token payload", self.token_payload),
            ("validation errors", self.invalid_registration),
            ("duplicate registration", self.duplicate_registration),
        ]


def run(base_url: str) -> int:
    logger.info("Testing API at %s", base_url)
    smoke = SmokeTest(base_url)
    failures = 0

    try:
        for name, step in smoke.steps():
            try:
                step()
            except httpx.ConnectError as e:
                logger.error("FAIL %s: cannot connect (%s)", name, e)
                return failures + 1
            except (AssertionError, httpx.HTTPError, KeyError, TypeError, ValueError) as e:
                failures += 1
                logger.error("FAIL %s: %s", name, e)
            else:
                logger.info("PASS %s", name)
    finally:
        smoke.close()

    if failures:
        logger.error("%d step(s) failed", failures)
    else:
        logger.info("All smoke tests passed")
    return failures


def main() -> int:
    base_url = sys.argv[1] if len(sys.argv) > 1 else os.getenv("API_BASE_URL", DEFAULT_BASE_URL)
    return 1 if run(base_url) else 0


if __name__ == "__main__":
    sys.exit(main())

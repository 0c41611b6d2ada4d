"""
Tests for the /admin endpoints.
"""


class TestAdminSignup:
    """Tests for POST /admin/signup."""

    def test_signup_returns_admin_and_admin_token(self, client, test_admin_data, decode):
        response = client.post("/admin/signup", json=test_admin_data)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Admin registered successfully"
        admin = body["data"]["admin"]
        assert admin["email"] == "admin@example.com"
        assert admin["isActive"] is True
        assert set(admin) == {"id", "email", "isActive", "createdAt"}

        claims = decode(body["data"]["token"])
        assert claims["role"] == "admin"
        assert claims["email"] == "admin@example.com"

    def test_signup_twice_conflicts(self, client, registered_admin, test_admin_data, assert_error_response):
        response = client.post("/admin/signup", json=test_admin_data)

        assert_error_response(response, 409, "Admin already exists with this email")

    def test_signup_validates_password_complexity(self, client, assert_error_response):
        response = client.post("/admin/signup", json={"email": "admin@example.com", "password": "admin"})

        data = assert_error_response(response, 400, "Validation failed")
        assert {error["field"] for error in data["errors"]} == {"password"}
        assert len(data["errors"]) == 2


class TestAdminLogin:
    """Tests for POST /admin/login."""

    def test_login_returns_token(self, client, registered_admin, test_admin_data, decode):
        response = client.post("/admin/login", json=test_admin_data)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Admin login successful"
        assert decode(body["data"]["token"])["role"] == "admin"

    def test_failures_share_one_payload(self, client, registered_admin):
        wrong_password = client.post("/admin/login", json={"email": "admin@example.com", "password": "Nope123"})
        unknown_email = client.post("/admin/login", json={"email": "ghost@example.com", "password": "Admin123"})

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.content == unknown_email.content

    def test_user_credentials_do_not_open_admin_login(self, client, registered_user, test_user_data):
        response = client.post("/admin/login", json={
            "email": test_user_data["email"],
            "password": test_user_data["password"],
        })

        assert response.status_code == 401


class TestCurrentAdmin:
    """Tests for GET /admin/me."""

    def test_me_returns_admin(self, client, registered_admin, auth_header):
        response = client.get("/admin/me", headers=auth_header(registered_admin["token"]))

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "admin@example.com"

    def test_me_rejects_user_token(self, client, registered_user, auth_header, assert_error_response):
        response = client.get("/admin/me", headers=auth_header(registered_user["token"]))

        assert_error_response(response, 403, "Insufficient permissions")

    def test_me_rejects_deactivated_admin(self, client, registered_admin, auth_header, assert_error_response):
        client.portal.call(
            client.app.state.mongo.database.admins.update_one,
            {"email": "admin@example.com"},
            {"$set": {"is_active": False}},
        )

        response = client.get("/admin/me", headers=auth_header(registered_admin["token"]))

        assert_error_response(response, 403, "Account is disabled")

"""HTTP tests for admin and shopper sign-in."""

from backoffice.api.application import SESSION_COOKIE


class TestAdminLogin:
    def test_valid_credentials_redirect_to_dashboard(self, client, add_admin):
        add_admin(name="A", email="a@x.com", password="p")

        response = client.get("/adminLogin", params={"email": "a@x.com", "password": "p"}, follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/services"

    def test_dashboard_lists_signed_in_admin(self, client, add_admin):
        add_admin(name="A", email="a@x.com", password="p")

        response = client.get("/adminLogin", params={"email": "a@x.com", "password": "p"})

        assert response.status_code == 200
        body = response.json()
        assert body["view"] == "Admin_Page"
        assert [admin["email"] for admin in body["model"]["admins"]] == ["a@x.com"]

    def test_wrong_password_shows_login_with_error(self, client, add_admin):
        add_admin(name="A", email="a@x.com", password="p")

        response = client.get("/adminLogin", params={"email": "a@x.com", "password": "wrong"}, follow_redirects=False)

        assert response.status_code == 401
        body = response.json()
        assert body["view"] == "Login"
        assert body["model"]["admin_error"] == "Invalid email or password"
        assert SESSION_COOKIE not in response.cookies

    def test_failed_login_does_not_open_dashboard(self, client, add_admin):
        add_admin(name="A", email="a@x.com", password="p")
        client.get("/adminLogin", params={"email": "a@x.com", "password": "wrong"})

        response = client.get("/admin/services")

        assert response.status_code == 401
        assert response.json()["view"] == "Login"

    def test_shopper_credentials_are_not_admin_credentials(self, client, register_user):
        register_user(email="jane@example.com", password="secret-1")

        response = client.get(
            "/adminLogin",
            params={"email": "jane@example.com", "password": "secret-1"},
            follow_redirects=False,
        )

        assert response.status_code == 401

    def test_missing_parameters_are_a_failed_login(self, client):
        response = client.get("/adminLogin", follow_redirects=False)
        assert response.status_code == 401


class TestUserLogin:
    def test_valid_credentials_show_buy_product(self, client, register_user):
        register_user(name="Jane Shopper", email="jane@example.com", password="secret-1")

        response = client.get("/userlogin", params={"userEmail": "jane@example.com", "userPassword": "secret-1"})

        assert response.status_code == 200
        body = response.json()
        assert body["view"] == "BuyProduct"
        assert body["model"]["name"] == "Jane Shopper"
        assert body["model"]["orders"] == []

    def test_wrong_password_shows_login_with_user_error(self, client, register_user):
        register_user(email="jane@example.com", password="secret-1")

        response = client.get("/userlogin", params={"userEmail": "jane@example.com", "userPassword": "nope"})

        assert response.status_code == 401
        body = response.json()
        assert body["view"] == "Login"
        assert body["model"]["user_error"] == "Invalid email or password"

    def test_unknown_email(self, client):
        response = client.get("/userlogin", params={"userEmail": "ghost@example.com", "userPassword": "x"})
        assert response.status_code == 401


class TestLogout:
    def test_logout_ends_the_session(self, shopper_client):
        response = shopper_client.get("/logout")
        assert response.status_code == 200
        assert response.json()["view"] == "Login"

        assert shopper_client.get("/product/back").status_code == 401


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": "backoffice"}

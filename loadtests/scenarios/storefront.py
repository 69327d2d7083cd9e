"""Storefront load test scenario.

One stateful SequentialTaskSet journey: an operator seeds a product and a
shopper, then the shopper signs in, searches, orders and reviews history.
Steps execute in order — each depends on the previous step succeeding.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import ADMIN_EMAIL, ADMIN_PASSWORD, order_form, product_form, user_form
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class ShoppingJourney(SequentialTaskSet):
    """Seed -> Sign in -> Search -> Order x2 -> Back."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def seed_catalogue_and_shopper(self):
        self.client.get(
            "/adminLogin",
            params={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
            name="GET /adminLogin",
            allow_redirects=False,
        )

        product = product_form()
        with self.client.post(
            "/addingProduct", data=product, catch_response=True, name="POST /addingProduct", allow_redirects=False
        ) as resp:
            if resp.status_code != 303:
                resp.failure(f"Add product failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()
                return
        self.state.product_name = product["name"]
        self.state.product_price = float(product["price"])

        user = user_form()
        with self.client.post(
            "/addingUser", data=user, catch_response=True, name="POST /addingUser", allow_redirects=False
        ) as resp:
            if resp.status_code != 303:
                resp.failure(f"Add user failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()
                return
        self.state.email = user["email"]
        self.state.password = user["password"]

        self.client.cookies.clear()

    @task
    def sign_in(self):
        with self.client.get(
            "/userlogin",
            params={"userEmail": self.state.email, "userPassword": self.state.password},
            catch_response=True,
            name="GET /userlogin",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Sign-in failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def search(self):
        with self.client.post(
            "/product/search",
            data={"productName": self.state.product_name},
            catch_response=True,
            name="POST /product/search",
        ) as resp:
            if resp.status_code != 200 or resp.json()["model"].get("product") is None:
                resp.failure(f"Search failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def search_unknown(self):
        with self.client.post(
            "/product/search",
            data={"productName": "no such product"},
            catch_response=True,
            name="POST /product/search [miss]",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Search miss failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def order(self):
        self._place_order()

    @task
    def order_again(self):
        self._place_order()

    @task
    def back(self):
        with self.client.get("/product/back", catch_response=True, name="GET /product/back") as resp:
            if resp.status_code != 200:
                resp.failure(f"History failed: {resp.status_code} — {extract_error_detail(resp)}")
            elif len(resp.json()["model"]["orders"]) != len(self.state.order_ids):
                resp.failure("History does not match the orders placed")

    @task
    def done(self):
        self.interrupt()

    def _place_order(self):
        with self.client.post(
            "/product/order",
            data=order_form(self.state.product_name, self.state.product_price),
            catch_response=True,
            name="POST /product/order",
        ) as resp:
            if resp.status_code == 200:
                self.state.order_ids.append(resp.json()["model"]["order_id"])
            else:
                resp.failure(f"Order failed: {resp.status_code} — {extract_error_detail(resp)}")


class ShopperUser(HttpUser):
    """Simulates shoppers walking the storefront end to end."""

    tasks = [ShoppingJourney]
    wait_time = between(0.5, 2.0)

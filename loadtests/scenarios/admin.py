"""Admin dashboard load test scenario."""

from locust import HttpUser, between, task

from loadtests.data_generators import ADMIN_EMAIL, ADMIN_PASSWORD
from loadtests.helpers.response import extract_error_detail


class DashboardUser(HttpUser):
    """Operators repeatedly loading the dashboard."""

    wait_time = between(1.0, 3.0)

    def on_start(self):
        with self.client.get(
            "/adminLogin",
            params={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
            catch_response=True,
            name="GET /adminLogin",
            allow_redirects=False,
        ) as resp:
            if resp.status_code != 303:
                resp.failure(f"Admin sign-in failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task(5)
    def dashboard(self):
        with self.client.get("/admin/services", catch_response=True, name="GET /admin/services") as resp:
            if resp.status_code != 200:
                resp.failure(f"Dashboard failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task(1)
    def add_forms(self):
        for path in ("/addAdmin", "/addProduct", "/addUser"):
            self.client.get(path, name=f"GET {path}")

import os

import pytest


@pytest.fixture(scope="session")
def _backoffice_domain(request):
    """Initialize the backoffice domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from backoffice.domain import backoffice

    backoffice.init()
    return backoffice


@pytest.fixture(scope="session", autouse=True)
def setup_db(_backoffice_domain):
    from backoffice.utils.db import drop_db, setup_db

    setup_db(_backoffice_domain)

    yield

    drop_db(_backoffice_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_backoffice_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _backoffice_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Record factories
# ---------------------------------------------------------------------------
@pytest.fixture()
def register_user():
    from backoffice.user.registration import RegisterUser
    from protean import current_domain

    def _register(name="Jane Shopper", email="jane@example.com", password="secret-1", phone=None):
        return current_domain.process(
            RegisterUser(name=name, email=email, password=password, phone=phone),
            asynchronous=False,
        )

    return _register


@pytest.fixture()
def add_admin():
    from backoffice.admin.management import AddAdmin
    from protean import current_domain

    def _add(name="Ada Admin", email="ada@example.com", password="admin-pass", role=None):
        return current_domain.process(
            AddAdmin(name=name, email=email, password=password, role=role),
            asynchronous=False,
        )

    return _add


@pytest.fixture()
def add_product():
    from backoffice.product.management import AddProduct
    from protean import current_domain

    def _add(name="Desk Lamp", price=19.99, description=None):
        return current_domain.process(
            AddProduct(name=name, price=price, description=description),
            asynchronous=False,
        )

    return _add


# ---------------------------------------------------------------------------
# HTTP clients
# ---------------------------------------------------------------------------
@pytest.fixture()
def client():
    from backoffice.api.application import create_app
    from fastapi.testclient import TestClient

    return TestClient(create_app())


@pytest.fixture()
def shopper_client(client, register_user):
    """Client signed in as a registered shopper."""
    register_user(name="Jane Shopper", email="jane@example.com", password="secret-1")
    response = client.get("/userlogin", params={"userEmail": "jane@example.com", "userPassword": "secret-1"})
    assert response.status_code == 200
    return client


@pytest.fixture()
def admin_client(client, add_admin):
    """Client signed in as an admin."""
    add_admin(name="Ada Admin", email="ada@example.com", password="admin-pass")
    response = client.get(
        "/adminLogin",
        params={"email": "ada@example.com", "password": "admin-pass"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    return client

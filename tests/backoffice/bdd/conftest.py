"""Shared BDD fixtures and step definitions for the backoffice."""

import pytest
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def page():
    """Holds the last response a step received."""
    return {"response": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced at {price:f}'))
def product_priced(add_product, name, price):
    add_product(name=name, price=price)


@given(parsers.cfparse('a shopper "{email}" with password "{password}"'), target_fixture="shopper_email")
def shopper_account(register_user, email, password):
    register_user(name="Shopper", email=email, password=password)
    return email


@given(parsers.cfparse('an admin "{email}" with password "{password}"'), target_fixture="admin_email")
def admin_account(add_admin, email, password):
    add_admin(name="Operator", email=email, password=password)
    return email


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the login page shows "{message}"'))
def login_page_shows(page, message):
    response = page["response"]
    assert response.status_code == 401
    body = response.json()
    assert body["view"] == "Login"
    assert message in body["model"].values()

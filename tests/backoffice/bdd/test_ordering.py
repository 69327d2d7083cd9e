"""BDD tests for shopper search and ordering."""

from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/ordering.feature")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the shopper is signed in with password "{password}"'))
def shopper_signs_in(client, page, shopper_email, password):
    page["response"] = client.get("/userlogin", params={"userEmail": shopper_email, "userPassword": password})


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the shopper orders {quantity:d} of "{name}" at {price:f}'))
def shopper_orders(client, page, quantity, name, price):
    page["response"] = client.post(
        "/product/order",
        data={"productName": name, "price": str(price), "quantity": str(quantity)},
    )


@when(parsers.cfparse('the shopper searches for "{name}"'))
def shopper_searches(client, page, name):
    page["response"] = client.post("/product/search", data={"productName": name})


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the order succeeds with an amount of {amount:f}"))
def order_succeeds(page, amount):
    body = page["response"].json()
    assert page["response"].status_code == 200
    assert body["view"] == "Order_success"
    assert body["model"]["amount"] == amount


@then("the order is rejected")
def order_rejected(page):
    assert page["response"].status_code == 422
    assert page["response"].json()["view"] == "Error"


@then(parsers.cfparse('the shopper\'s history lists "{name}"'))
def history_lists(client, name):
    orders = client.get("/product/back").json()["model"]["orders"]
    assert [order["product_name"] for order in orders] == [name]


@then("the shopper has no orders")
def no_orders(client):
    assert client.get("/product/back").json()["model"]["orders"] == []


@then(parsers.cfparse('the shopper is told "{message}"'))
def shopper_told(page, message):
    assert page["response"].json()["model"]["message"] == message


@then("the storefront asks the shopper to sign in")
def storefront_refuses(client):
    response = client.get("/product/back")
    assert response.status_code == 401
    assert response.json()["view"] == "Login"

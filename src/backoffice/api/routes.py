"""FastAPI endpoints for the backoffice.

Three routers: sign-in/out, the shopper storefront, and the admin dashboard
with its CRUD screens. Every endpoint answers with a view (name + model) or a
redirect to the dashboard.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Query
from protean.utils.globals import current_domain

from backoffice.admin.admin import admins
from backoffice.admin.management import AddAdmin, RemoveAdmin, UpdateAdmin
from backoffice.api.dependencies import CurrentUser, Session, require_admin
from backoffice.api.schemas import AdminSummary, OrderSummary, ProductSummary, UserSummary, summarize
from backoffice.api.views import redirect_to_dashboard, render
from backoffice.auth.gate import gate
from backoffice.order.order import orders, orders_for_user
from backoffice.order.placement import PlaceOrder
from backoffice.product.management import AddProduct, RemoveProduct, UpdateProduct
from backoffice.product.product import find_product_by_name, products
from backoffice.shared.errors import InvalidCredentials
from backoffice.user.management import RemoveUser, UpdateUser
from backoffice.user.registration import RegisterUser
from backoffice.user.user import users

PRODUCT_UNAVAILABLE_MESSAGE = "SORRY...! Product Unavailable"

auth_router = APIRouter(tags=["auth"])
storefront_router = APIRouter(prefix="/product", tags=["storefront"])
admin_router = APIRouter(tags=["admin"], dependencies=[Depends(require_admin)])


def _buy_product_view(user, **extra):
    return render(
        "BuyProduct",
        name=user.name,
        orders=summarize(OrderSummary, orders_for_user(user)),
        **extra,
    )


# --- Sign-in endpoints ---


@auth_router.get("/adminLogin")
async def admin_login(
    session: Session,
    email: Annotated[str, Query()] = "",
    password: Annotated[str, Query()] = "",
):
    if not gate.authenticate_admin(email, password):
        raise InvalidCredentials("admin")
    gate.sign_in_admin(session, email)
    return redirect_to_dashboard()


@auth_router.get("/userlogin")
async def user_login(
    session: Session,
    user_email: Annotated[str, Query(alias="userEmail")] = "",
    user_password: Annotated[str, Query(alias="userPassword")] = "",
):
    if not gate.authenticate_user(user_email, user_password):
        raise InvalidCredentials("user")
    gate.sign_in_user(session, user_email)
    return _buy_product_view(gate.current_user(session))


@auth_router.get("/logout")
async def logout(session: Session):
    gate.sign_out(session)
    return render("Login", message="You have been signed out")


# --- Storefront endpoints ---


@storefront_router.post("/search")
async def search_product(
    user: CurrentUser,
    product_name: Annotated[str, Form(alias="productName")] = "",
):
    product = find_product_by_name(product_name)
    if product is None:
        return _buy_product_view(user, product=None, message=PRODUCT_UNAVAILABLE_MESSAGE)
    return _buy_product_view(user, product=ProductSummary.of(product))


@storefront_router.post("/order")
async def place_order(
    user: CurrentUser,
    product_name: Annotated[str, Form(alias="productName")],
    price: Annotated[float, Form()],
    quantity: Annotated[int, Form()],
):
    command = PlaceOrder(
        user_id=user.id,
        product_name=product_name,
        unit_price=price,
        quantity=quantity,
    )
    order_id = current_domain.process(command, asynchronous=False)
    order = orders.require(order_id)
    return render(
        "Order_success",
        amount=order.total_amount,
        order_id=order_id,
        order=OrderSummary.of(order),
    )


@storefront_router.get("/back")
async def back_to_products(user: CurrentUser):
    return _buy_product_view(user)


# --- Dashboard ---


@admin_router.get("/admin/services")
async def dashboard():
    return render(
        "Admin_Page",
        users=summarize(UserSummary, users.list()),
        admins=summarize(AdminSummary, admins.list()),
        products=summarize(ProductSummary, products.list()),
        orders=summarize(OrderSummary, orders.list()),
    )


# --- Admin CRUD ---


@admin_router.get("/addAdmin")
async def add_admin_form():
    return render("Add_Admin")


@admin_router.post("/addingAdmin")
async def add_admin(
    name: Annotated[str, Form()],
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
    phone: Annotated[str | None, Form()] = None,
    role: Annotated[str | None, Form()] = None,
):
    command = AddAdmin(name=name, email=email, password=password, phone=phone, role=role)
    current_domain.process(command, asynchronous=False)
    return redirect_to_dashboard()


@admin_router.get("/updateAdmin/{admin_id}")
async def update_admin_form(admin_id: str):
    return render("Update_Admin", admin=AdminSummary.of(admins.require(admin_id)))


@admin_router.get("/updatingAdmin/{admin_id}")
async def update_admin(
    admin_id: str,
    name: Annotated[str | None, Query()] = None,
    email: Annotated[str | None, Query()] = None,
    phone: Annotated[str | None, Query()] = None,
    password: Annotated[str | None, Query()] = None,
    role: Annotated[str | None, Query()] = None,
):
    command = UpdateAdmin(
        admin_id=admin_id,
        name=name,
        email=email,
        phone=phone,
        password=password,
        role=role,
    )
    current_domain.process(command, asynchronous=False)
    return redirect_to_dashboard()


@admin_router.get("/deleteAdmin/{admin_id}")
async def delete_admin(admin_id: str):
    current_domain.process(RemoveAdmin(admin_id=admin_id), asynchronous=False)
    return redirect_to_dashboard()


# --- Product CRUD ---


@admin_router.get("/addProduct")
async def add_product_form():
    return render("Add_Product")


@admin_router.post("/addingProduct")
async def add_product(
    name: Annotated[str, Form()],
    price: Annotated[float, Form()],
    description: Annotated[str | None, Form()] = None,
):
    current_domain.process(AddProduct(name=name, price=price, description=description), asynchronous=False)
    return redirect_to_dashboard()


@admin_router.get("/updateProduct/{product_id}")
async def update_product_form(product_id: str):
    return render("Update_Product", product=ProductSummary.of(products.require(product_id)))


@admin_router.get("/updatingProduct/{product_id}")
async def update_product(
    product_id: str,
    name: Annotated[str | None, Query()] = None,
    price: Annotated[float | None, Query()] = None,
    description: Annotated[str | None, Query()] = None,
):
    command = UpdateProduct(product_id=product_id, name=name, price=price, description=description)
    current_domain.process(command, asynchronous=False)
    return redirect_to_dashboard()


@admin_router.get("/deleteProduct/{product_id}")
async def delete_product(product_id: str):
    current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)
    return redirect_to_dashboard()


# --- User CRUD ---


@admin_router.get("/addUser")
async def add_user_form():
    return render("Add_User")


@admin_router.post("/addingUser")
async def add_user(
    name: Annotated[str, Form()],
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
    phone: Annotated[str | None, Form()] = None,
):
    command = RegisterUser(name=name, email=email, password=password, phone=phone)
    current_domain.process(command, asynchronous=False)
    return redirect_to_dashboard()


@admin_router.get("/updateUser/{user_id}")
async def update_user_form(user_id: str):
    return render("Update_User", user=UserSummary.of(users.require(user_id)))


@admin_router.get("/updatingUser/{user_id}")
async def update_user(
    user_id: str,
    name: Annotated[str | None, Query()] = None,
    email: Annotated[str | None, Query()] = None,
    phone: Annotated[str | None, Query()] = None,
    password: Annotated[str | None, Query()] = None,
):
    command = UpdateUser(user_id=user_id, name=name, email=email, phone=phone, password=password)
    current_domain.process(command, asynchronous=False)
    return redirect_to_dashboard()


@admin_router.get("/deleteUser/{user_id}")
async def delete_user(user_id: str):
    current_domain.process(RemoveUser(user_id=user_id), asynchronous=False)
    return redirect_to_dashboard()

"""Pydantic schemas for the data handed to views.

Aggregates never reach a view directly: each one is copied into a summary
that leaves credentials out.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel

# --- View envelope ---


class ViewResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "view": "Order_success",
                    "model": {"amount": 59.97, "order_id": "0b6c4f3e-7f55-4b8e-9a1d-3c0f2f6d8a11"},
                }
            ]
        }
    }

    view: str
    model: dict[str, Any] = {}


class HealthResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok", "domain": "backoffice"}]}}

    status: str = "ok"
    domain: str


# --- Record summaries ---


class UserSummary(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    registered_at: datetime | None = None

    @classmethod
    def of(cls, user) -> UserSummary:
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            phone=user.phone,
            registered_at=user.registered_at,
        )


class AdminSummary(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    role: str
    created_at: datetime | None = None

    @classmethod
    def of(cls, admin) -> AdminSummary:
        return cls(
            id=str(admin.id),
            name=admin.name,
            email=admin.email,
            phone=admin.phone,
            role=admin.role,
            created_at=admin.created_at,
        )


class ProductSummary(BaseModel):
    id: str
    name: str
    price: float
    description: str | None = None

    @classmethod
    def of(cls, product) -> ProductSummary:
        return cls(
            id=str(product.id),
            name=product.name,
            price=product.price,
            description=product.description,
        )


class OrderSummary(BaseModel):
    id: str
    user_id: str
    user_email: str | None = None
    product_name: str
    unit_price: float
    quantity: int
    total_amount: float
    placed_at: datetime

    @classmethod
    def of(cls, order) -> OrderSummary:
        return cls(
            id=str(order.id),
            user_id=str(order.user_id),
            user_email=order.user_email,
            product_name=order.product_name,
            unit_price=order.unit_price,
            quantity=order.quantity,
            total_amount=order.total_amount,
            placed_at=order.placed_at,
        )


def summarize(summary_cls, records) -> list:
    return [summary_cls.of(record) for record in records]

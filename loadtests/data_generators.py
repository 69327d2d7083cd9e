"""Faker-based data generators for Locust load test scenarios.

Each generator produces form values that pass the domain's validation rules
and match the exact field names the backoffice routes read.
"""

import os
import random
import uuid

from faker import Faker

fake = Faker()

ADMIN_EMAIL = os.environ.get("LOADTEST_ADMIN_EMAIL", "loadtest-admin@example.com")
ADMIN_PASSWORD = os.environ.get("LOADTEST_ADMIN_PASSWORD", "loadtest")


def valid_email() -> str:
    """Generate unique emails that pass account email validation.

    Rules: exactly one @, no whitespace, domain with a dot,
    no leading/trailing dots, no consecutive dots.
    """
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def valid_phone() -> str:
    area = random.randint(200, 999)
    prefix = random.randint(200, 999)
    line = random.randint(1000, 9999)
    return f"+1-{area}-{prefix}-{line}"


def user_form() -> dict:
    """Form body for ``POST /addingUser``."""
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "password": fake.password(length=12),
        "phone": valid_phone(),
    }


def product_form() -> dict:
    """Form body for ``POST /addingProduct``. Names are unique per call."""
    return {
        "name": f"{fake.word().title()} {fake.word().title()} {uuid.uuid4().hex[:6]}",
        "price": f"{random.uniform(1, 500):.2f}",
        "description": fake.sentence(nb_words=8),
    }


def order_form(product_name: str, price: float) -> dict:
    """Form body for ``POST /product/order``."""
    return {
        "productName": product_name,
        "price": f"{price:.2f}",
        "quantity": str(random.randint(1, 5)),
    }

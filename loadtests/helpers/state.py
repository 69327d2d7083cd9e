"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks one simulated shopper: credentials, catalogue and orders placed."""

    email: str | None = None
    password: str | None = None
    product_name: str | None = None
    product_price: float | None = None
    order_ids: list[str] = field(default_factory=list)

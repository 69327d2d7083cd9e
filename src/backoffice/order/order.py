"""Order aggregate — an immutable record of one product bought by one user."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String

from backoffice.domain import backoffice
from backoffice.order.pricing import is_whole_cents, line_total
from backoffice.shared.store import RecordStore


@backoffice.aggregate
class Order:
    """A placed order.

    The product name and unit price are snapshots taken when the order is
    placed; later catalogue changes do not touch them. ``total_amount`` is
    computed once, at placement, and the aggregate offers no way to change it.
    """

    user_id: Identifier(required=True)
    user_email: String(max_length=254)
    product_name: String(required=True, max_length=255)
    unit_price: Float(required=True, min_value=0.01)
    quantity: Integer(required=True, min_value=1)
    total_amount: Float(required=True, min_value=0.0)
    placed_at: DateTime(required=True)

    @invariant.post
    def unit_price_is_whole_cents(self):
        if self.unit_price is not None and not is_whole_cents(self.unit_price):
            raise ValidationError({"unit_price": [f"Unit price {self.unit_price} is not a whole number of cents"]})

    @invariant.post
    def total_matches_price_times_quantity(self):
        if self.quantity is None or not is_whole_cents(self.unit_price):
            return
        if self.total_amount != float(line_total(self.unit_price, self.quantity)):
            raise ValidationError(
                {"total_amount": [f"Total {self.total_amount} does not equal {self.unit_price} x {self.quantity}"]}
            )

    @classmethod
    def place(cls, user, product_name, unit_price, quantity):
        from backoffice.order.events import OrderPlaced

        try:
            total = line_total(unit_price, quantity)
        except (TypeError, ValueError) as exc:
            raise ValidationError({"total_amount": [str(exc)]}) from None

        now = datetime.now()
        order = cls(
            user_id=user.id,
            user_email=user.email,
            product_name=(product_name or "").strip(),
            unit_price=unit_price,
            quantity=quantity,
            total_amount=float(total),
            placed_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=order.user_id,
                product_name=order.product_name,
                unit_price=order.unit_price,
                quantity=order.quantity,
                total_amount=order.total_amount,
                placed_at=now,
            )
        )
        return order


orders = RecordStore(Order, sort_key=lambda order: (order.placed_at, str(order.id)))


def orders_for_user(user) -> list[Order]:
    """Order history of ``user``, oldest first. No user means no history."""
    if user is None:
        return []
    return orders.filter(user_id=str(user.id))

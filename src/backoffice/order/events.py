"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from backoffice.domain import backoffice


@backoffice.event(part_of="Order")
class OrderPlaced:
    """A user placed an order; the total was computed at this moment."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    product_name: String(required=True)
    unit_price: Float(required=True)
    quantity: Integer(required=True)
    total_amount: Float(required=True)
    placed_at: DateTime(required=True)

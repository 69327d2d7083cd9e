"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from backoffice.domain import backoffice


@backoffice.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    added_at: DateTime(required=True)


@backoffice.event(part_of="Product")
class ProductDetailsUpdated:
    """A product's name, price or description changed.

    Orders already placed keep the price they were placed at.
    """

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    previous_price: Float()

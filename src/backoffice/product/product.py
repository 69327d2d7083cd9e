"""Product aggregate — a catalogue entry looked up by its exact name."""

from datetime import datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, String, Text

from backoffice.domain import backoffice
from backoffice.order.pricing import is_whole_cents
from backoffice.shared.store import RecordStore


@backoffice.aggregate
class Product:
    """A sellable item. Its name is the key shoppers search by."""

    name: String(required=True, max_length=255, unique=True)
    price: Float(required=True, min_value=0.01)
    description: Text()
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def price_is_whole_cents(self):
        if self.price is not None and not is_whole_cents(self.price):
            raise ValidationError({"price": [f"Price {self.price} is not a whole number of cents"]})

    @classmethod
    def add(cls, name, price, description=None):
        from backoffice.product.events import ProductAdded

        now = datetime.now()
        product = cls(
            name=(name or "").strip(),
            price=price,
            description=description,
            created_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                price=product.price,
                added_at=now,
            )
        )
        return product

    def update_details(self, name=None, price=None, description=None):
        """Apply the non-blank values; blank ones keep the current value."""
        from backoffice.product.events import ProductDetailsUpdated

        previous_price = self.price
        with atomic_change(self):
            if name:
                self.name = name.strip()
            if price is not None:
                self.price = price
            if description:
                self.description = description

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                previous_price=previous_price,
            )
        )


products = RecordStore(Product, sort_key=lambda product: (product.name or "").lower())


def find_product_by_name(name) -> Product | None:
    """Exact-name lookup. Surrounding whitespace in the query is ignored."""
    name = (name or "").strip()
    if not name:
        return None
    return products.first(name=name)

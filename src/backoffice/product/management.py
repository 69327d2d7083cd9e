"""Catalogue maintenance — add, update and remove products."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String, Text

from backoffice.domain import backoffice
from backoffice.product.product import Product, find_product_by_name, products
from backoffice.utils.logging import get_logger

logger = get_logger(__name__)


@backoffice.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    price: Float(required=True, min_value=0.01)
    description: Text()


@backoffice.command(part_of="Product")
class UpdateProduct:
    """Change a product's details. Blank fields keep their current value."""

    product_id: Identifier(required=True)
    name: String(max_length=255)
    price: Float(min_value=0.01)
    description: Text()


@backoffice.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


def _ensure_name_free(name, product_id=None):
    holder = find_product_by_name(name)
    if holder is not None and str(holder.id) != str(product_id):
        raise ValidationError({"name": [f"A product named {name.strip()!r} already exists"]})


@backoffice.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        _ensure_name_free(command.name)

        product = Product.add(
            name=command.name,
            price=command.price,
            description=command.description,
        )
        products.create(product)
        logger.info("Product added", product_id=str(product.id), name=product.name, price=product.price)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        if command.name:
            _ensure_name_free(command.name, command.product_id)

        products.update(
            command.product_id,
            name=command.name,
            price=command.price,
            description=command.description,
        )
        logger.info("Product updated", product_id=str(command.product_id))

    @handle(RemoveProduct)
    def remove_product(self, command):
        removed = products.delete(command.product_id)
        if removed:
            logger.info("Product removed", product_id=str(command.product_id))
        return removed

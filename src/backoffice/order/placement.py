"""Order placement — command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String

from backoffice.domain import backoffice
from backoffice.order.order import Order, orders
from backoffice.user.user import users
from backoffice.utils.logging import get_logger

logger = get_logger(__name__)


@backoffice.command(part_of="Order")
class PlaceOrder:
    """Buy ``quantity`` units of a product at ``unit_price`` each."""

    user_id: Identifier(required=True)
    product_name: String(required=True, max_length=255)
    unit_price: Float(required=True, min_value=0.01)
    quantity: Integer(required=True, min_value=1)


@backoffice.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        user = users.require(command.user_id)

        order = Order.place(
            user=user,
            product_name=command.product_name,
            unit_price=command.unit_price,
            quantity=command.quantity,
        )
        orders.create(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(user.id),
            product_name=order.product_name,
            quantity=order.quantity,
            total_amount=order.total_amount,
        )
        return str(order.id)

import logging

from ..errors import InvalidQuantity, NotFound
from ..models import Detail, Order
from ..schemas import DetailOut, OrderOut

logger = logging.getLogger(__name__)


def to_order_response(order):
    return OrderOut(
        id=order.id,
        order_type=order.order_type,
        details=[DetailOut(item_id=d.item_id, quantity=d.quantity) for d in order.details],
    )


class OrderService:
    def __init__(self, orders, items):
        self.orders = orders
        self.items = items

    def place_order(self, request):
        # check every line before anything is written
        for detail in request.details:
            if detail.quantity <= 0:
                raise InvalidQuantity(
                    f"quantity must be positive, got {detail.quantity}",
                    item_id=detail.item_id,
                    quantity=detail.quantity,
                )
            if not self.items.exists_by_id(detail.item_id):
                raise NotFound(f"item {detail.item_id} not found", item_id=detail.item_id)

        order = Order(
            order_type=request.order_type,
            details=[
                Detail(position=position, item_id=d.item_id, quantity=d.quantity)
                for position, d in enumerate(request.details)
            ],
        )
        order = self.orders.save(order)
        logger.info("placed order id=%s with %d details", order.id, len(order.details))
        return order

    def get_order(self, order_id):
        order = self.orders.find_by_id(order_id)
        if order is None:
            raise NotFound(f"order {order_id} not found", order_id=order_id)
        return order

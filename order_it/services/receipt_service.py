import logging

from ..errors import DanglingItemReference, InvalidQuantity
from ..schemas import Receipt, ReceiptLine

logger = logging.getLogger(__name__)


def build_receipt(order, items):
    """Turn an order into a receipt using each item's current name and price.

    Lines keep the order's detail sequence. Nothing is written back to the
    order or the items.
    """
    lines = []
    total_price = 0

    for detail in order.details:
        if detail.quantity is None or detail.quantity <= 0:
            raise InvalidQuantity(
                f"quantity must be positive, got {detail.quantity}",
                item_id=detail.item_id,
                quantity=detail.quantity,
            )

        item = items.find_by_id(detail.item_id)
        if item is None:
            logger.error("order %s references deleted item %s", order.id, detail.item_id)
            raise DanglingItemReference(
                f"item {detail.item_id} no longer exists",
                order_id=order.id,
                item_id=detail.item_id,
                position=detail.position,
            )

        line = ReceiptLine(name=item.kor_name, quantity=detail.quantity, price=detail.quantity * item.price)
        total_price += line.price
        lines.append(line)

    return Receipt(order_type=order.order_type, lines=lines, total_price=total_price)

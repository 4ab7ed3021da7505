import logging

from ..errors import PrintFailed
from .receipt_service import build_receipt

logger = logging.getLogger(__name__)


class PrintService:
    """Builds a receipt for an order and hands it to the printer sink."""

    def __init__(self, items, printer):
        self.items = items
        self.printer = printer

    def print(self, order):
        receipt = build_receipt(order, self.items)
        logger.info("print orderType=%s totalPrice=%s", receipt.order_type.value, receipt.total_price)

        try:
            sent = self.printer.send(receipt)
        except Exception as e:
            logger.exception("printer failed for order %s", order.id)
            raise PrintFailed(
                f"printer error: {e}",
                order_type=receipt.order_type.value,
                total_price=receipt.total_price,
                reason=f"{e.__class__.__name__}: {e}",
            ) from e

        if sent is False:
            logger.error("printer rejected receipt for order %s", order.id)
            raise PrintFailed(
                "printer rejected the receipt",
                order_type=receipt.order_type.value,
                total_price=receipt.total_price,
                reason="rejected",
            )
        return receipt

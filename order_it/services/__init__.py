from .item_service import ItemService, validate_item_request
from .order_service import OrderService
from .print_service import PrintService
from .receipt_service import build_receipt

__all__ = ["ItemService", "OrderService", "PrintService", "build_receipt", "validate_item_request"]

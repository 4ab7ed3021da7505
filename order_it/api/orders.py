from fastapi import APIRouter, Depends, status

from ..schemas import OrderIn, OrderOut, Receipt
from ..services import OrderService, PrintService, build_receipt
from ..services.order_service import to_order_response
from .deps import get_order_service, get_print_service

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.post("", response_model=OrderOut, status_code=status.HTTP_201_CREATED)
def place_order(req: OrderIn, service: OrderService = Depends(get_order_service)):
    return to_order_response(service.place_order(req))


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    return to_order_response(service.get_order(order_id))


# Preview only, nothing is sent to the printer
@router.get("/{order_id}/receipt", response_model=Receipt)
def preview_receipt(order_id: int, service: OrderService = Depends(get_order_service)):
    return build_receipt(service.get_order(order_id), service.items)


@router.post("/{order_id}/print", response_model=Receipt)
def print_order(
    order_id: int,
    orders: OrderService = Depends(get_order_service),
    printing: PrintService = Depends(get_print_service),
):
    return printing.print(orders.get_order(order_id))

from fastapi import Depends
from sqlalchemy.orm import Session

from ..config import IMAGE_DIR
from ..database import get_db
from ..images import ImageStore
from ..printer import create_printer
from ..repository import ItemRepository, OrderRepository
from ..services import ItemService, OrderService, PrintService


def get_printer():
    return create_printer()


def get_image_store():
    return ImageStore(IMAGE_DIR)


def get_item_service(db: Session = Depends(get_db)):
    return ItemService(ItemRepository(db))


def get_order_service(db: Session = Depends(get_db)):
    return OrderService(OrderRepository(db), ItemRepository(db))


def get_print_service(db: Session = Depends(get_db), printer=Depends(get_printer)):
    return PrintService(ItemRepository(db), printer)

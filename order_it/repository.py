# order_it/repository.py
from sqlalchemy import select

from .models import Item, Order


class ItemRepository:
    """Item rows behind a SQLAlchemy session. Each write commits on its own."""

    def __init__(self, db):
        self.db = db

    def find_all(self):
        return self.db.execute(select(Item).order_by(Item.id)).scalars().all()

    def find_by_category(self, category):
        stmt = select(Item).where(Item.category == category).order_by(Item.id)
        return self.db.execute(stmt).scalars().all()

    def find_by_id(self, item_id):
        return self.db.get(Item, item_id)

    def exists_by_id(self, item_id):
        return self.find_by_id(item_id) is not None

    def save(self, item):
        try:
            self.db.add(item)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(item)
        return item

    def delete_by_id(self, item_id):
        item = self.find_by_id(item_id)
        if item is None:
            return
        try:
            self.db.delete(item)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise


class OrderRepository:
    def __init__(self, db):
        self.db = db

    def find_by_id(self, order_id):
        return self.db.get(Order, order_id)

    def save(self, order):
        try:
            self.db.add(order)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(order)
        return order

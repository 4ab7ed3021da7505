# order_it/models.py
import enum

from sqlalchemy import Column, Integer, String, ForeignKey, Enum
from sqlalchemy.orm import relationship

from .database import Base


class Category(str, enum.Enum):
    MAIN = "MAIN"
    SIDE = "SIDE"
    DRINK = "DRINK"
    DESSERT = "DESSERT"


class OrderType(str, enum.Enum):
    DINE_IN = "DINE_IN"
    TAKE_OUT = "TAKE_OUT"


class Item(Base):
    __tablename__ = "item"
    id = Column(Integer, primary_key=True, autoincrement=True)
    eng_name = Column(String(100), nullable=False)
    kor_name = Column(String(100), nullable=False)
    price = Column(Integer, nullable=False)
    category = Column(Enum(Category), nullable=False, index=True)
    image_path = Column(String(255), nullable=True)

    def update(self, eng_name, kor_name, price, image_path, category):
        self.eng_name = eng_name
        self.kor_name = kor_name
        self.price = price
        self.image_path = image_path
        self.category = category
        return self


class Order(Base):
    __tablename__ = "orders"
    id = Column(Integer, primary_key=True, autoincrement=True)
    order_type = Column(Enum(OrderType), nullable=False)

    details = relationship(
        "Detail",
        back_populates="order",
        order_by="Detail.position",
        cascade="all, delete-orphan",
    )


class Detail(Base):
    __tablename__ = "detail"
    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    position = Column(Integer, nullable=False)
    # plain reference: an item may be deleted after the order was placed
    item_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)

    order = relationship("Order", back_populates="details")

import os

os.environ["DB_URL"] = "sqlite://"
os.environ["PRINTER_KIND"] = "log"

import pytest
from fastapi.testclient import TestClient

from order_it.api.deps import get_image_store, get_printer
from order_it.database import Base, SessionLocal, engine
from order_it.images import ImageStore
from order_it.main import app
from order_it.models import Category
from order_it.repository import ItemRepository, OrderRepository
from order_it.schemas import ItemRequest


class RecordingPrinter:
    def __init__(self, error=None, result=True):
        self.error = error
        self.result = result
        self.receipts = []

    def send(self, receipt):
        if self.error is not None:
            raise self.error
        self.receipts.append(receipt)
        return self.result


def item_request(**overrides):
    fields = dict(eng_name="Bibimbap", kor_name="비빔밥", price=8000, category=Category.MAIN, image_path=None)
    fields.update(overrides)
    return ItemRequest(**fields)


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def items(db):
    return ItemRepository(db)


@pytest.fixture
def orders(db):
    return OrderRepository(db)


@pytest.fixture
def printer():
    return RecordingPrinter()


@pytest.fixture
def client(printer, tmp_path):
    app.dependency_overrides[get_printer] = lambda: printer
    app.dependency_overrides[get_image_store] = lambda: ImageStore(tmp_path / "images")
    yield TestClient(app)
    app.dependency_overrides.clear()

import pytest

from conftest import item_request
from order_it.errors import ErrorKind, InvalidPrice, MissingField, NotFound, PriceTooHigh
from order_it.models import Category
from order_it.services import ItemService


@pytest.fixture
def service(items):
    return ItemService(items)


def test_create_item_is_listed(service):
    created = service.create_item(item_request(image_path="abc_bibimbap.png"))

    listed = service.get_all_items()
    assert [i.id for i in listed] == [created.id]
    assert listed[0].kor_name == "비빔밥"
    assert listed[0].price == 8000
    assert listed[0].image_path == "abc_bibimbap.png"


@pytest.mark.parametrize("price", [1, 100000])
def test_price_bounds_are_inclusive(service, price):
    assert service.create_item(item_request(price=price)).price == price


@pytest.mark.parametrize("price, error", [(0, InvalidPrice), (-500, InvalidPrice), (100001, PriceTooHigh)])
def test_out_of_range_price_is_rejected_and_not_stored(service, price, error):
    with pytest.raises(error):
        service.create_item(item_request(price=price))
    assert service.get_all_items() == []


@pytest.mark.parametrize("field", ["eng_name", "kor_name", "category", "price"])
def test_missing_field(service, field):
    with pytest.raises(MissingField) as excinfo:
        service.create_item(item_request(**{field: None}))
    assert excinfo.value.kind is ErrorKind.MISSING_FIELD
    assert excinfo.value.context == {"field": field}
    assert service.get_all_items() == []


def test_blank_name_counts_as_missing(service):
    with pytest.raises(MissingField):
        service.create_item(item_request(eng_name="   "))


def test_missing_field_wins_over_bad_price(service):
    with pytest.raises(MissingField):
        service.create_item(item_request(kor_name=None, price=0))


def test_list_by_category_keeps_insertion_order(service):
    cola = service.create_item(item_request(eng_name="Cola", kor_name="콜라", price=2000, category=Category.DRINK))
    service.create_item(item_request())
    cider = service.create_item(item_request(eng_name="Cider", kor_name="사이다", price=2000, category=Category.DRINK))

    drinks = service.get_items_by_category(Category.DRINK)
    assert [i.id for i in drinks] == [cola.id, cider.id]
    assert service.get_items_by_category(Category.DESSERT) == []


def test_batch_is_not_atomic(service):
    result = service.create_item_batch([
        item_request(eng_name="Tteokbokki", kor_name="떡볶이"),
        item_request(price=0),
        item_request(eng_name="Ramyun", kor_name="라면"),
    ])

    assert [i.eng_name for i in result.created] == ["Tteokbokki", "Ramyun"]
    assert len(result.failures) == 1
    assert result.failures[0].index == 1
    assert result.failures[0].error == "INVALID_PRICE"
    assert len(service.get_all_items()) == 2


def test_update_replaces_all_fields(service):
    created = service.create_item(item_request(image_path="old.png"))

    updated = service.update_item(
        created.id,
        item_request(eng_name="Dolsot Bibimbap", kor_name="돌솥비빔밥", price=9500, image_path=None),
    )

    assert updated.id == created.id
    assert updated.eng_name == "Dolsot Bibimbap"
    assert updated.price == 9500
    assert updated.image_path is None
    assert service.get_all_items() == [updated]


def test_update_unknown_item(service):
    existing = service.create_item(item_request())

    with pytest.raises(NotFound) as excinfo:
        service.update_item(existing.id + 100, item_request(price=1))
    assert excinfo.value.context == {"item_id": existing.id + 100}
    assert service.get_all_items() == [existing]


def test_update_validates_before_lookup(service):
    with pytest.raises(PriceTooHigh):
        service.update_item(12345, item_request(price=200000))


def test_delete_twice(service):
    created = service.create_item(item_request())

    service.delete_item(created.id)
    assert service.get_all_items() == []

    with pytest.raises(NotFound):
        service.delete_item(created.id)
    assert service.get_all_items() == []

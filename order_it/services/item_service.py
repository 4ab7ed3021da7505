"""Item catalog: validated create/update/delete and listing of menu items."""
import logging

from ..errors import InvalidPrice, MissingField, NotFound, OrderItError, PriceTooHigh
from ..models import Item
from ..schemas import BatchFailure, BatchResult, ItemResponse

logger = logging.getLogger(__name__)

MAX_PRICE = 100000


def validate_item_request(request):
    """Check required fields and the price range of an item request.

    Raises MissingField, InvalidPrice or PriceTooHigh, in that order of
    precedence. Nothing is touched before this passes.
    """
    for field in ("eng_name", "kor_name", "category", "price"):
        value = getattr(request, field)
        if value is None or (isinstance(value, str) and not value.strip()):
            logger.error("item request is missing %s", field)
            raise MissingField(f"required field '{field}' is missing", field=field)

    if request.price <= 0:
        logger.error("item price must be positive: %s", request.price)
        raise InvalidPrice("price must be greater than 0", price=request.price)

    if request.price > MAX_PRICE:
        logger.error("item price is too high: %s", request.price)
        raise PriceTooHigh(f"price must not exceed {MAX_PRICE}", price=request.price, limit=MAX_PRICE)


def to_item_response(item):
    return ItemResponse(
        id=item.id,
        eng_name=item.eng_name,
        kor_name=item.kor_name,
        price=item.price,
        image_path=item.image_path,
    )


class ItemService:
    def __init__(self, items):
        self.items = items

    def get_all_items(self):
        logger.info("return all items")
        return [to_item_response(item) for item in self.items.find_all()]

    def get_items_by_category(self, category):
        logger.info("return items by category %s", category.value)
        return [to_item_response(item) for item in self.items.find_by_category(category)]

    def create_item(self, request):
        logger.info("create item eng_name=%s", request.eng_name)
        validate_item_request(request)

        item = Item(
            eng_name=request.eng_name,
            kor_name=request.kor_name,
            price=request.price,
            category=request.category,
            image_path=request.image_path,
        )
        return to_item_response(self.items.save(item))

    def create_item_batch(self, requests):
        """Create each item independently; earlier successes are never undone."""
        created, failures = [], []
        for index, request in enumerate(requests):
            try:
                created.append(self.create_item(request))
            except OrderItError as e:
                failures.append(BatchFailure(index=index, error=e.kind.value, detail=e.context))
        logger.info("batch finished: %d created, %d failed", len(created), len(failures))
        return BatchResult(created=created, failures=failures)

    def update_item(self, item_id, request):
        logger.info("update item id=%s", item_id)
        validate_item_request(request)

        item = self.items.find_by_id(item_id)
        if item is None:
            logger.error("item %s not found for update", item_id)
            raise NotFound(f"item {item_id} not found", item_id=item_id)

        item.update(
            request.eng_name,
            request.kor_name,
            request.price,
            request.image_path,
            request.category,
        )
        return to_item_response(self.items.save(item))

    def delete_item(self, item_id):
        if not self.items.exists_by_id(item_id):
            logger.error("item %s not found for delete", item_id)
            raise NotFound(f"item {item_id} not found", item_id=item_id)

        self.items.delete_by_id(item_id)
        logger.info("deleted item id=%s", item_id)

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .models import Category, OrderType


# Item fields are optional here so that missing values reach the catalog
# validation and fail as MISSING_FIELD instead of a generic 422.
class ItemRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    eng_name: Optional[str] = Field(default=None, alias="engName")
    kor_name: Optional[str] = Field(default=None, alias="korName")
    price: Optional[int] = None
    category: Optional[Category] = None
    image_path: Optional[str] = Field(default=None, alias="imagePath")


class ItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    eng_name: str = Field(alias="engName")
    kor_name: str = Field(alias="korName")
    price: int
    image_path: Optional[str] = Field(default=None, alias="imagePath")


class BatchFailure(BaseModel):
    index: int
    error: str
    detail: dict


class BatchResult(BaseModel):
    created: List[ItemResponse]
    failures: List[BatchFailure]


class DetailIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    item_id: int = Field(alias="itemId")
    quantity: int = 1


class OrderIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_type: OrderType = Field(alias="orderType")
    details: List[DetailIn]


class DetailOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    item_id: int = Field(alias="itemId")
    quantity: int


class OrderOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    order_type: OrderType = Field(alias="orderType")
    details: List[DetailOut]


# Outbound to the printer sink
class ReceiptLine(BaseModel):
    name: str
    quantity: int
    price: int  # quantity * unit price


class Receipt(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_type: OrderType = Field(alias="orderType")
    lines: List[ReceiptLine]
    total_price: int = Field(alias="totalPrice")

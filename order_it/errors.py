"""Failure kinds raised by the catalog, aggregation and print pipeline.

Every error carries a stable ``kind`` so callers branch on it instead of
parsing messages, plus the structured ``context`` that caused it.
"""
import enum


class ErrorKind(str, enum.Enum):
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_PRICE = "INVALID_PRICE"
    PRICE_TOO_HIGH = "PRICE_TOO_HIGH"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    NOT_FOUND = "NOT_FOUND"
    DANGLING_ITEM_REFERENCE = "DANGLING_ITEM_REFERENCE"
    PRINT_FAILED = "PRINT_FAILED"


class OrderItError(Exception):
    kind = None

    def __init__(self, message, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self):
        return {"error": self.kind.value, "message": self.message, "detail": self.context}


class ValidationFailed(OrderItError):
    """Caller-correctable input problem."""


class MissingField(ValidationFailed):
    kind = ErrorKind.MISSING_FIELD


class InvalidPrice(ValidationFailed):
    kind = ErrorKind.INVALID_PRICE


class PriceTooHigh(ValidationFailed):
    kind = ErrorKind.PRICE_TOO_HIGH


class InvalidQuantity(ValidationFailed):
    kind = ErrorKind.INVALID_QUANTITY


class NotFound(OrderItError):
    kind = ErrorKind.NOT_FOUND


class DanglingItemReference(OrderItError):
    kind = ErrorKind.DANGLING_ITEM_REFERENCE


class PrintFailed(OrderItError):
    kind = ErrorKind.PRINT_FAILED

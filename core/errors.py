"""Validation errors raised before any allocation work is done."""

from typing import Optional

from .config import (
    NULL_INPUT_MESSAGE,
    NOT_AN_OBJECT_MESSAGE,
    INVALID_FORMAT_MESSAGE,
)


class AllocationInputError(ValueError):
    """Base class for rejected order/inventory inputs.

    Every subclass has a fixed ``kind`` and message. ``detail`` names the
    offending key or warehouse and is shown after the message.
    """

    kind = "AllocationInput"
    message = "Inputs rejected"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class NullInputError(AllocationInputError):
    """Order or warehouses missing, or a warehouse without inventory."""

    kind = "NullInput"
    message = NULL_INPUT_MESSAGE


class NotAnObjectError(AllocationInputError):
    """Order is not a mapping or warehouses is not a sequence."""

    kind = "NotAnObject"
    message = NOT_AN_OBJECT_MESSAGE


class InvalidFormatError(AllocationInputError):
    """Misspelled/mis-cased item, bad quantity, or malformed warehouse entry."""

    kind = "InvalidFormat"
    message = INVALID_FORMAT_MESSAGE

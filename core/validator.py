"""Input validation - rejects malformed orders and warehouse lists."""

import logging
import math
import numbers
from collections.abc import Mapping, Sequence

from .errors import NullInputError, NotAnObjectError, InvalidFormatError
from .spelling import SpellingDictionary

logger = logging.getLogger(__name__)


def is_valid_quantity(value) -> bool:
    """Whether value is a usable quantity: a finite, whole, non-negative number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    if not math.isfinite(value):
        return False
    return value >= 0 and value == int(value)


def _is_mapping(value) -> bool:
    return isinstance(value, Mapping)


def _is_sequence(value) -> bool:
    # A string is a sequence of characters, never a warehouse list
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


class InputValidator:
    """
    Gatekeeper run before any allocation work.

    Checks, in order (the first failing tier wins):
    1. NullInput: order or warehouses is None
    2. NotAnObject: order is not a mapping or warehouses is not a list-like
    3. NullInput: a warehouse entry has no inventory
    4. InvalidFormat: a bad item key or quantity in the order, then a
       malformed warehouse entry (missing name, bad inventory key/quantity)

    Item keys must be lowercase dictionary words mapped to valid quantities.
    """

    def __init__(self, dictionary: SpellingDictionary):
        self.dictionary = dictionary

    def validate(self, order, warehouses) -> None:
        """Raise an AllocationInputError subclass if inputs are invalid."""
        if order is None or warehouses is None:
            raise NullInputError("order and warehouses are required")

        if not _is_mapping(order) or not _is_sequence(warehouses):
            raise NotAnObjectError("order must be a mapping and warehouses a list")

        for idx, warehouse in enumerate(warehouses):
            if _is_mapping(warehouse) and warehouse.get("inventory") is None:
                raise NullInputError(f"warehouse #{idx + 1} has no inventory")

        bad_items = self.find_invalid_items(order)
        if bad_items:
            logger.warning("Rejected order: invalid item entries %r", bad_items)
            raise InvalidFormatError(f"order items {bad_items!r}")

        for idx, warehouse in enumerate(warehouses):
            self._validate_warehouse(idx, warehouse)

    def _validate_warehouse(self, idx: int, warehouse) -> None:
        if not _is_mapping(warehouse):
            raise InvalidFormatError(f"warehouse #{idx + 1} is not a mapping")

        name = warehouse.get("name")
        if not isinstance(name, str) or not name:
            logger.warning("Rejected warehouse #%d: missing name", idx + 1)
            raise InvalidFormatError(f"warehouse #{idx + 1} has no name")

        inventory = warehouse["inventory"]
        if not _is_mapping(inventory):
            raise InvalidFormatError(f"inventory of warehouse '{name}' is not a mapping")

        bad_items = self.find_invalid_items(inventory)
        if bad_items:
            logger.warning("Rejected warehouse '%s': invalid item entries %r", name, bad_items)
            raise InvalidFormatError(f"items {bad_items!r} in warehouse '{name}'")

    def find_invalid_items(self, items: Mapping) -> list:
        """
        Return the keys of items that break the item rules.

        Rules: the key is a string, written in lowercase, a dictionary word,
        and its value is a valid quantity.
        """
        return [
            item for item, quantity in items.items()
            if not self.is_valid_item_name(item) or not is_valid_quantity(quantity)
        ]

    def is_valid_item_name(self, item) -> bool:
        """Whether item is a lowercase, correctly spelled word."""
        if not isinstance(item, str) or not item:
            return False
        if item != item.lower():
            return False
        return self.dictionary.is_correctly_spelled(item)

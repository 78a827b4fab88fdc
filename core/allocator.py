"""Order allocation logic - fills an order from the fewest warehouses."""

import logging
from collections.abc import Mapping, Sequence
from typing import Optional

from .models import (
    AllocationConfig,
    ItemAvailability,
    Order,
    Shipment,
    ShipmentPlan,
)
from .spelling import SpellingDictionary, build_dictionary
from .validator import InputValidator

logger = logging.getLogger(__name__)


def remove_zero_requested_items(order: Mapping) -> Order:
    """Return a copy of order without items requested with quantity 0."""
    return {item: quantity for item, quantity in order.items() if quantity}


def total_available(item: str, warehouses: Sequence, limit=None) -> int:
    """
    Sum the stock of item across all warehouses.

    Args:
        item: Item name
        warehouses: Warehouse entries in priority order
        limit: Stop summing once the total reaches this value

    Returns:
        Total available units (possibly capped near limit)
    """
    total = 0
    for warehouse in warehouses:
        if limit is not None and total >= limit:
            break
        total += warehouse["inventory"].get(item, 0)
    return total


def is_inventory_available(order: Mapping, warehouses: Sequence) -> bool:
    """Whether the combined stock covers every item of the order in full."""
    for item, requested in order.items():
        if total_available(item, warehouses, limit=requested) < requested:
            logger.debug("Not enough '%s' in stock for %s requested", item, requested)
            return False
    return True


def is_order_complete(order: Mapping) -> bool:
    """Whether no outstanding items remain in a working order."""
    return len(order) == 0


def summarize_availability(order: Mapping, warehouses: Sequence) -> list[ItemAvailability]:
    """Requested vs. total stock for each requested item (zeros dropped)."""
    return [
        ItemAvailability(
            item=item,
            requested=requested,
            available=total_available(item, warehouses),
        )
        for item, requested in remove_zero_requested_items(order).items()
    ]


class InventoryAllocator:
    """
    Computes the cheapest shipment for an order.

    "Cheapest" means using as few warehouses as a first-fit scan allows:
    - Warehouses are scanned in the given order; earlier ones are preferred
    - Each warehouse gives as much of every outstanding item as it has
    - Scanning stops as soon as the order is complete
    - If the combined stock cannot cover the whole order, nothing is shipped

    The dictionary used to validate item names is loaded once per allocator
    and only read afterwards, so one allocator can serve many calls.
    """

    def __init__(
        self,
        dictionary: Optional[SpellingDictionary] = None,
        config: Optional[AllocationConfig] = None,
    ):
        self.config = config or AllocationConfig()
        self.dictionary = dictionary if dictionary is not None else build_dictionary(self.config)
        self.validator = InputValidator(self.dictionary)

    def compute_cheapest_shipment(self, order, warehouses) -> list[Shipment]:
        """
        Allocate an order across warehouses.

        Args:
            order: Requested quantity per item, e.g. {"apple": 5}
            warehouses: Ordered list of {"name": ..., "inventory": {...}}

        Returns:
            List of {warehouse_name: {item: quantity}} in warehouse order,
            only for warehouses that ship something. Empty if the order
            cannot be fully satisfied or requests nothing.

        Raises:
            NullInputError, NotAnObjectError, InvalidFormatError
        """
        self.validator.validate(order, warehouses)

        # Working copy: the caller's order is never modified
        remaining = remove_zero_requested_items(order)
        if is_order_complete(remaining):
            logger.debug("Order requests nothing, returning empty shipment")
            return []

        if not is_inventory_available(remaining, warehouses):
            logger.info("Order %s cannot be fulfilled from %d warehouses", dict(order), len(warehouses))
            return []

        shipments: list[Shipment] = []
        for warehouse in warehouses:
            name = warehouse["name"]
            inventory = warehouse["inventory"]
            provided_items = {}

            for item in list(remaining):
                available = inventory.get(item, 0)
                provided = min(available, remaining[item])
                if provided > 0:
                    provided_items[item] = provided
                    remaining[item] -= provided
                    if not remaining[item]:
                        del remaining[item]

            if provided_items:
                logger.debug("Warehouse '%s' provides %s", name, provided_items)
                shipments.append({name: provided_items})

            if is_order_complete(remaining):
                break

        logger.info("Order fulfilled from %d warehouse(s)", len(shipments))
        return shipments

    def compute_plan(self, order, warehouses) -> ShipmentPlan:
        """
        Allocate an order and wrap the result for display.

        Warehouses are first reordered and filtered by the allocator config
        (priority and exclusions). Availability per item is included so an
        empty plan can be explained.
        """
        if isinstance(warehouses, (list, tuple)):
            warehouses = self.config.apply_to(warehouses)

        shipments = self.compute_cheapest_shipment(order, warehouses)
        return ShipmentPlan(
            shipments=shipments,
            availability=summarize_availability(order, warehouses),
        )

"""Data models for order allocation."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from .config import DEFAULT_DICTIONARY_LANGUAGE

# Raw shapes accepted and produced by the allocator
Order = dict[str, int]
Shipment = dict[str, dict[str, int]]


@dataclass
class ShipmentLine:
    """A single item quantity shipped from one warehouse."""
    warehouse: str
    item: str
    quantity: int


@dataclass
class ItemAvailability:
    """Requested quantity of an item vs. total stock across all warehouses."""
    item: str
    requested: int
    available: int

    @property
    def shortfall(self) -> int:
        """Units missing to satisfy the request (0 if satisfiable)."""
        return max(self.requested - self.available, 0)

    @property
    def is_satisfiable(self) -> bool:
        return self.available >= self.requested


@dataclass
class ShipmentPlan:
    """Result of one allocation, with summary helpers for display."""
    shipments: list[Shipment] = field(default_factory=list)
    availability: list[ItemAvailability] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Whether nothing is shipped (infeasible or empty order)."""
        return len(self.shipments) == 0

    @property
    def warehouse_count(self) -> int:
        """Number of warehouses used - the cost being minimized."""
        return len(self.shipments)

    @property
    def warehouse_names(self) -> list[str]:
        return [name for entry in self.shipments for name in entry]

    @property
    def lines(self) -> list[ShipmentLine]:
        """Flatten shipments into one line per (warehouse, item)."""
        result = []
        for entry in self.shipments:
            for warehouse, items in entry.items():
                for item, quantity in items.items():
                    result.append(ShipmentLine(warehouse=warehouse, item=item, quantity=quantity))
        return result

    @property
    def total_quantity(self) -> int:
        """Total units shipped across all warehouses."""
        return sum(line.quantity for line in self.lines)

    @property
    def shortfalls(self) -> list[ItemAvailability]:
        """Items that cannot be fully supplied."""
        return [a for a in self.availability if not a.is_satisfiable]

    def quantity_by_item(self) -> dict[str, int]:
        """Shipped units per item, summed over warehouses."""
        totals: dict[str, int] = {}
        for line in self.lines:
            totals[line.item] = totals.get(line.item, 0) + line.quantity
        return totals


@dataclass
class ShipmentExport:
    """Excel workbook with the shipment and the remaining inventory."""
    filename: str
    data: bytes  # Excel file bytes
    warehouse_count: int
    total_quantity: int


@dataclass
class AllocationConfig:
    """Configuration for allocation runs."""
    warehouse_priority: list[str] = field(default_factory=list)
    excluded_warehouses: list[str] = field(default_factory=list)
    dictionary_language: str = DEFAULT_DICTIONARY_LANGUAGE
    word_list_path: Optional[str] = None

    def apply_to(self, warehouses: list) -> list:
        """
        Return warehouses reordered by priority, without excluded ones.

        Warehouses named in warehouse_priority come first, in that order.
        The rest keep their original relative order. Entries are not copied
        or modified. Entries without a usable name count as unprioritized and
        are kept, so validation still sees them.

        Args:
            warehouses: Warehouse entries ({"name": ..., "inventory": ...})

        Returns:
            New list of the same entries
        """
        def name_of(entry) -> Optional[str]:
            if isinstance(entry, Mapping):
                name = entry.get("name")
                if isinstance(name, str):
                    return name
            return None

        kept = [w for w in warehouses if name_of(w) not in self.excluded_warehouses]
        rank = {name: idx for idx, name in enumerate(self.warehouse_priority)}
        fallback = len(rank)
        # sorted() is stable, so unprioritized warehouses keep input order
        return sorted(kept, key=lambda w: rank.get(name_of(w), fallback))

    def to_dict(self) -> dict:
        """Convert config to dictionary for JSON export."""
        return {
            "warehouse_priority": self.warehouse_priority,
            "excluded_warehouses": self.excluded_warehouses,
            "dictionary_language": self.dictionary_language,
            "word_list_path": self.word_list_path,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AllocationConfig":
        """Create config from dictionary (JSON import)."""
        return cls(
            warehouse_priority=data.get("warehouse_priority", []),
            excluded_warehouses=data.get("excluded_warehouses", []),
            dictionary_language=data.get("dictionary_language", DEFAULT_DICTIONARY_LANGUAGE),
            word_list_path=data.get("word_list_path"),
        )


def merge_warehouse_priority(priority: list[str], warehouse_names: list[str]) -> list[str]:
    """
    Merge a saved priority list with the warehouses of a new inventory file.

    Known warehouses keep their saved position; warehouses not in the saved
    list are appended in file order; names no longer present are dropped.
    """
    merged = [name for name in priority if name in warehouse_names]
    for name in warehouse_names:
        if name not in merged:
            merged.append(name)
    return merged

# models/item.py
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from itertools import count

from utils.money import format_money, to_decimal

# Item model representing a sellable catalog entry.
# UNIT items are sold in discrete counts, BULK items by a continuous
# measure (kg, m, ...). Stock quantities for both are plain Decimals.

_item_ids = count(1)


class ItemKind(Enum):
    UNIT = "unit"
    BULK = "bulk"


@dataclass(frozen=True)
class Item:
    name: str
    price_per_unit: Decimal
    kind: ItemKind
    weight_per_item: Decimal | None = None   # UNIT only, kg per item
    measurement_unit: str | None = None      # BULK only, e.g. "kg"
    item_id: int = field(default_factory=lambda: next(_item_ids))

    def __post_init__(self):
        price = to_decimal(self.price_per_unit)
        if price < 0:
            raise ValueError(f"Price of {self.name} must not be negative.")
        object.__setattr__(self, "price_per_unit", price)
        if self.weight_per_item is not None:
            object.__setattr__(self, "weight_per_item", to_decimal(self.weight_per_item))

    @property
    def is_bulk(self) -> bool:
        return self.kind is ItemKind.BULK

    def __str__(self) -> str:
        price = format_money(self.price_per_unit)
        if self.is_bulk:
            return f"{self.name} ({price}/{self.measurement_unit})"
        return f"{self.name} ({price}/item, {self.weight_per_item} kg each)"


def unit_item(name: str, price_per_unit, weight_per_item) -> Item:
    return Item(name, price_per_unit, ItemKind.UNIT, weight_per_item=weight_per_item)


def bulk_item(name: str, price_per_unit, measurement_unit: str) -> Item:
    return Item(name, price_per_unit, ItemKind.BULK, measurement_unit=measurement_unit)

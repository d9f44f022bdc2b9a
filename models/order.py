# models/order.py
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from itertools import count
from typing import Iterable

from models.item import Item
from utils.money import format_money, to_decimal

# Order model representing a customer order.
# Orders are frozen once created; lines keep their entry order.

_order_numbers = count(1)


@dataclass(frozen=True)
class OrderLine:
    item: Item
    quantity: Decimal  # count for UNIT items, measured amount for BULK items

    def __post_init__(self):
        object.__setattr__(self, "quantity", to_decimal(self.quantity))

    @property
    def line_total(self) -> Decimal:
        return self.item.price_per_unit * self.quantity

    def __str__(self) -> str:
        return f"{self.item.name} x {self.quantity} = {format_money(self.line_total)}"


@dataclass(frozen=True)
class Order:
    order_id: str
    created_at: datetime
    lines: tuple[OrderLine, ...] = field(default_factory=tuple)
    customer_name: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def create(cls, lines: Iterable[OrderLine], customer_name: str | None = None) -> "Order":
        return cls(
            order_id=f"ORD-{next(_order_numbers):06d}",
            created_at=datetime.now(),
            lines=tuple(lines),
            customer_name=customer_name,
        )

    @property
    def total(self) -> Decimal:
        return sum((line.line_total for line in self.lines), Decimal(0))

    def __str__(self) -> str:
        return f"{self.order_id} {self.created_at:%Y-%m-%d %H:%M:%S} {format_money(self.total)}"

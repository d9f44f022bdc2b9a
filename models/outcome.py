# models/outcome.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.item import Item
    from models.order import Order

# Outcome of an order-processing step. Empty queues and stock shortages are
# expected results reported to the caller, not exceptions.


class FailureKind(Enum):
    EMPTY_QUEUE = "empty_queue"
    INSUFFICIENT_STOCK = "insufficient_stock"


@dataclass(frozen=True)
class Shortage:
    item: Item
    needed: Decimal
    available: Decimal


@dataclass(frozen=True)
class Outcome:
    ok: bool
    message: str | None = None
    failure: FailureKind | None = None
    shortage: Shortage | None = None
    order: Order | None = None
    total_revenue: Decimal | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str | None = None, **extra) -> Outcome:
        return cls(ok=True, message=message, **extra)

    @classmethod
    def fail(cls, failure: FailureKind, message: str, **extra) -> Outcome:
        return cls(ok=False, message=message, failure=failure, **extra)

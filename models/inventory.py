# models/inventory.py
# Inventory model representing stock levels of catalog items.
# Stock is keyed by item_id; quantities are Decimals (counts for UNIT
# items, measured amounts for BULK items) and never go below zero.
from decimal import Decimal

from models.item import Item
from models.order import Order
from models.outcome import FailureKind, Outcome, Shortage
from utils.logger import get_logger
from utils.money import to_decimal

logger = get_logger("inventory")

DEFAULT_LOW_STOCK_THRESHOLD = Decimal(5)


class Inventory:
    def __init__(self, allow_negative_adjustments: bool = False):
        self.stock: dict[int, Decimal] = {}   # item_id -> quantity
        self._items: dict[int, Item] = {}     # item_id -> item
        self.allow_negative_adjustments = allow_negative_adjustments

    def add_stock(self, item: Item, quantity) -> None:
        qty = to_decimal(quantity)
        if qty < 0:
            if not self.allow_negative_adjustments:
                raise ValueError("Stock adjustments must not be negative.")
            available = self.get_quantity(item)
            if available + qty < 0:
                raise ValueError(
                    f"Insufficient stock for {item.name}: cannot adjust {available} by {qty}."
                )
        self._items[item.item_id] = item
        self.stock[item.item_id] = self.stock.get(item.item_id, Decimal(0)) + qty
        logger.info(f"Stock for {item.name} adjusted by {qty} -> {self.stock[item.item_id]}")

    def get_quantity(self, item: Item) -> Decimal:
        return self.stock.get(item.item_id, Decimal(0))

    def snapshot(self) -> dict[Item, Decimal]:
        return {self._items[item_id]: qty for item_id, qty in self.stock.items()}

    def low_stock_items(self, threshold=DEFAULT_LOW_STOCK_THRESHOLD) -> list[tuple[Item, Decimal]]:
        # Items strictly below the threshold; only items that were ever stocked.
        limit = to_decimal(threshold)
        return [(self._items[item_id], qty) for item_id, qty in self.stock.items() if qty < limit]

    def try_consume(self, item: Item, quantity) -> bool:
        qty = to_decimal(quantity)
        available = self.get_quantity(item)
        if available < qty:
            return False
        self._items[item.item_id] = item
        self.stock[item.item_id] = available - qty
        return True

    def try_consume_order(self, order: Order) -> Outcome:
        """
        Deduct every line of an order, or nothing at all.

        Requested quantities are summed per item first, so two lines for the
        same item are checked and deducted together. The first shortage, in
        line order, is reported and the ledger is left untouched.
        """
        requested: dict[int, tuple[Item, Decimal]] = {}
        for line in order.lines:
            item, qty = requested.get(line.item.item_id, (line.item, Decimal(0)))
            requested[line.item.item_id] = (item, qty + line.quantity)

        for item, needed in requested.values():
            available = self.get_quantity(item)
            if available < needed:
                message = f"Insufficient stock for {item.name}. Needed {needed}, have {available}."
                logger.warning(f"{order.order_id}: {message}")
                return Outcome.fail(
                    FailureKind.INSUFFICIENT_STOCK,
                    message,
                    shortage=Shortage(item=item, needed=needed, available=available),
                    order=order,
                )

        for item, needed in requested.values():
            if not self.try_consume(item, needed):
                # Validation above covers the whole order; only a concurrent
                # mutation could get here.
                raise RuntimeError(f"Stock for {item.name} changed during {order.order_id}")

        return Outcome.success(order=order)

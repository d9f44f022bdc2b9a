# services/order_book.py

from collections import deque
from decimal import Decimal

from models.inventory import Inventory
from models.order import Order
from models.outcome import FailureKind, Outcome
from utils.logger import get_logger
from utils.money import format_money

logger = get_logger("order_book")


class OrderBook:
    # First-in-first-out queue of orders. An order moves from pending to
    # fulfilled exactly once, when the inventory accepts all of its lines.

    def __init__(self, inventory: Inventory, currency_symbol: str = "$"):
        self.inventory = inventory
        self.currency_symbol = currency_symbol
        self._pending: deque[Order] = deque()
        self._fulfilled: list[Order] = []

    @property
    def pending_orders(self) -> tuple[Order, ...]:
        return tuple(self._pending)

    @property
    def fulfilled_orders(self) -> tuple[Order, ...]:
        return tuple(self._fulfilled)

    @property
    def total_revenue(self) -> Decimal:
        # Always derived from the fulfilled orders, never cached.
        return sum((o.total for o in self._fulfilled), Decimal(0))

    def queue_order(self, order: Order) -> None:
        self._pending.append(order)
        logger.info(f"Queued {order.order_id} ({len(self._pending)} pending)")

    def process_next(self) -> Outcome:
        if not self._pending:
            logger.info("Process next called with an empty queue")
            return Outcome.fail(FailureKind.EMPTY_QUEUE, "No queued orders.")

        head = self._pending[0]
        result = self.inventory.try_consume_order(head)
        if not result:
            # The order stays at the head so it can be retried after restocking.
            return result

        self._pending.popleft()
        self._fulfilled.append(head)
        revenue = self.total_revenue
        message = f"Processed order for {format_money(head.total, self.currency_symbol)}"
        logger.info(f"{head.order_id}: {message}; revenue now {format_money(revenue, self.currency_symbol)}")
        return Outcome.success(message, order=head, total_revenue=revenue)

# services/report_service.py
from collections import Counter
from datetime import datetime
from decimal import Decimal

from models.inventory import Inventory
from models.item import Item
from services.order_book import OrderBook
# report_service.py is a service module (Service Layer)
# with the class name ReportService, responsible for sales reports and
# low stock alerts over the fulfilled orders and the stock ledger.
class ReportService:
    def __init__(self, order_book: OrderBook, inventory: Inventory):
        self.order_book = order_book
        self.inventory = inventory

    def sales_summary(self, start: datetime | None = None, end: datetime | None = None) -> dict:
        # Sales statistics over fulfilled orders.
        # start / end bound the order creation time (inclusive);
        # if omitted, all fulfilled orders are included.
        orders = self.order_book.fulfilled_orders
        if start or end:
            def in_range(o):
                return (start is None or o.created_at >= start) and \
                       (end is None or o.created_at <= end)
            orders = list(filter(in_range, orders))
        # Counter tracks quantity sold per item name;
        # most_common(5) gives the top 5 best sellers.
        revenue = sum((o.total for o in orders), Decimal(0))
        counter = Counter()
        for o in orders:
            for line in o.lines:
                counter[line.item.name] += line.quantity
        top5 = counter.most_common(5)
        return {"revenue": revenue, "orders": len(orders), "top5": top5}

    def low_stock(self, threshold=5) -> list[tuple[Item, Decimal]]:
        # Alert for items strictly below the threshold.
        return self.inventory.low_stock_items(threshold)

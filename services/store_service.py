# services/store_service.py
"""
store_service.py

Root coordinator for the stockroom: owns the single Inventory, the single
OrderBook, the customers and the catalog. All mutations go through here,
one at a time, so the validate-then-deduct step in the inventory never
interleaves with another change.

A presentation layer issues commands (queue_order, place_order,
process_next, restock) and re-reads snapshot() afterwards to render the
queues, the revenue and the low stock list.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from data.repository import DataRepository, validate_settings
from models.customer import Customer
from models.inventory import Inventory
from models.item import Item, bulk_item, unit_item
from models.order import Order, OrderLine
from models.outcome import Outcome
from services.order_book import OrderBook
from services.report_service import ReportService
from utils.logger import get_logger, setup_logger
from utils.money import format_money, to_decimal

logger = get_logger("store")


@dataclass(frozen=True)
class StoreSnapshot:
    pending: tuple[Order, ...]
    fulfilled: tuple[Order, ...]
    total_revenue: Decimal
    low_stock: tuple[tuple[Item, Decimal], ...]


class StoreService:
    def __init__(self, settings: dict | None = None):
        self.settings = validate_settings(settings or {})
        self.inventory = Inventory(
            allow_negative_adjustments=self.settings["allow_negative_adjustments"]
        )
        self.order_book = OrderBook(self.inventory, currency_symbol=self.settings["currency_symbol"])
        self.reports = ReportService(self.order_book, self.inventory)
        self.catalog: dict[str, Item] = {}
        self.customers: dict[str, Customer] = {}

    @classmethod
    def from_repository(cls, repo: DataRepository, log_dir=None) -> "StoreService":
        # Construction-time seeding: catalog, stock, customers and their queued orders.
        # Pass log_dir to configure the stockroom logger at startup; without it
        # the host application owns the logging setup.
        if log_dir is not None:
            setup_logger(log_dir)
        store = cls(repo.get_settings())

        for key, entry in repo.get_catalog().items():
            store.catalog[key] = build_item(key, entry)

        for key, qty in repo.get_stock().items():
            store.restock(store.lookup(key), qty)

        for entry in repo.get_customers():
            name = entry["name"]
            for raw_lines in entry.get("orders", []):
                lines = [OrderLine(store.lookup(l["item"]), l["quantity"]) for l in raw_lines]
                store.place_order(name, lines)
            store.customer(name)

        logger.info(
            f"Seeded {len(store.catalog)} items, {len(store.customers)} customers, "
            f"{len(store.order_book.pending_orders)} queued orders"
        )
        return store

    def lookup(self, key: str) -> Item:
        if key not in self.catalog:
            raise ValueError(f"Unknown catalog item: {key}")
        return self.catalog[key]

    def customer(self, name: str) -> Customer:
        if name not in self.customers:
            self.customers[name] = Customer(name)
        return self.customers[name]

    # Commands

    def restock(self, item: Item, quantity) -> None:
        self.inventory.add_stock(item, quantity)

    def queue_order(self, order: Order) -> None:
        self.order_book.queue_order(order)

    def place_order(self, customer_name: str, lines: Iterable[OrderLine]) -> Order:
        order = self.customer(customer_name).create_order(lines)
        self.queue_order(order)
        return order

    def process_next(self) -> Outcome:
        return self.order_book.process_next()

    # Queries

    def pending_orders(self) -> tuple[Order, ...]:
        return self.order_book.pending_orders

    def fulfilled_orders(self) -> tuple[Order, ...]:
        return self.order_book.fulfilled_orders

    def total_revenue(self) -> Decimal:
        return self.order_book.total_revenue

    def low_stock(self, threshold=None) -> list[tuple[Item, Decimal]]:
        if threshold is None:
            threshold = self.settings["low_stock_threshold"]
        return self.reports.low_stock(threshold)

    def format_revenue(self) -> str:
        return format_money(self.total_revenue(), self.settings["currency_symbol"])

    def snapshot(self, threshold=None) -> StoreSnapshot:
        return StoreSnapshot(
            pending=self.pending_orders(),
            fulfilled=self.fulfilled_orders(),
            total_revenue=self.total_revenue(),
            low_stock=tuple(self.low_stock(threshold)),
        )


def build_item(key: str, entry: dict) -> Item:
    kind = entry.get("kind", "unit")
    name = entry.get("name", key)
    price = to_decimal(entry["price"])
    if kind == "bulk":
        return bulk_item(name, price, entry.get("unit", ""))
    if kind == "unit":
        return unit_item(name, price, to_decimal(entry.get("weight", 0)))
    raise ValueError(f"Unknown item kind for {key}: {kind}")

"""
Shared fixtures for the stockroom tests.

Catalog items mirror the demo data: three unit items and one bulk item.
"""
import pytest

from models.inventory import Inventory
from models.item import bulk_item, unit_item
from models.order import Order, OrderLine
from services.order_book import OrderBook


@pytest.fixture
def pen():
    return unit_item("Blue Pen", "1.50", "0.02")


@pytest.fixture
def cable():
    return unit_item("USB-C Cable", "9.99", "0.08")


@pytest.fixture
def paper():
    return unit_item("A4 Paper (100)", "5.49", "0.6")


@pytest.fixture
def gravel():
    return bulk_item("Construction Gravel", "20.00", "kg")


@pytest.fixture
def inventory(pen, cable, paper, gravel):
    """Inventory stocked like the demo store."""
    inv = Inventory()
    inv.add_stock(pen, 12)
    inv.add_stock(paper, 50)
    inv.add_stock(cable, 30)
    inv.add_stock(gravel, 20)
    return inv


@pytest.fixture
def order_book(inventory):
    return OrderBook(inventory)


@pytest.fixture
def make_order():
    """Build an order from (item, quantity) pairs."""
    def _make(*pairs, customer_name=None):
        return Order.create([OrderLine(item, qty) for item, qty in pairs], customer_name)
    return _make


@pytest.fixture
def quantities(pen, cable, paper, gravel):
    """Current stock of every demo item, keyed by short name."""
    def _read(inv):
        return {
            "pen": inv.get_quantity(pen),
            "cable": inv.get_quantity(cable),
            "paper": inv.get_quantity(paper),
            "gravel": inv.get_quantity(gravel),
        }
    return _read

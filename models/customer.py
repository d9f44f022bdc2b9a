# models/customer.py
from typing import Iterable

from models.order import Order, OrderLine


class Customer:
    def __init__(self, name: str):
        self.name = name
        self.orders: list[Order] = []  # append-only log

    def create_order(self, lines: Iterable[OrderLine]) -> Order:
        # No validation of the lines: empty orders, zero quantities and
        # repeated items are all accepted here.
        order = Order.create(lines, customer_name=self.name)
        self.orders.append(order)
        return order

    def __str__(self) -> str:
        return self.name

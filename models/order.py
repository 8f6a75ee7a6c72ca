"""
models/order.py
---------------
Domain models for customer tabs (`Comanda`) and their lines (`ItemComanda`).
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class Order:
    """
    A single dining party's tab.

    Attributes:
        code: Database primary key (None for new records).
        date: Day the tab was opened.
        table_number: Table the party sat at.
        customer_name: Name the tab is under.
    """
    date: date
    table_number: int
    customer_name: str
    code: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.code} | {self.date} | table {self.table_number} | {self.customer_name}"


@dataclass
class OrderLine:
    """
    Quantity of one menu item purchased on one order.
    (order_code, menu_item_code) is unique.
    """
    order_code: int
    menu_item_code: int
    quantity: int

"""
models/report.py
----------------
Read-only rows produced by the sales reports.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class OrderLineDetail:
    """One (order, line) pair joined with its menu item."""
    order_code: int
    date: date
    table_number: int
    customer_name: str
    item_name: str
    item_description: Optional[str]
    quantity: int
    unit_price: Decimal
    line_total: Decimal


@dataclass(frozen=True)
class OrderTotal:
    """An order together with the sum of its line totals."""
    order_code: int
    date: date
    table_number: int
    customer_name: str
    total: Decimal


@dataclass(frozen=True)
class DailyRevenue:
    """Sum of every line total sold on one date."""
    date: date
    total: Decimal

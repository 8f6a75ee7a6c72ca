"""
models/menu_item.py
-------------------
Domain model for entries on the cafe menu (table `Cardapio`).
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class MenuItem:
    """
    Represents a coffee the cafe sells.

    Attributes:
        code: Database primary key (None for new records).
        name: Unique display name (e.g., 'Espresso').
        unit_price: Price of a single unit, two decimal places.
        description: Optional free-text description.
    """
    name: str
    unit_price: Decimal
    description: Optional[str] = None
    code: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} - {self.unit_price:.2f}"

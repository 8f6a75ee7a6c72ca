"""
db/seed.py
----------
Fills a freshly reset schema with the fixed demonstration data:
4 coffees, 3 tabs and 5 order lines.
Run this module directly to reset and seed a database:
    python -m db.seed
"""

from datetime import date
from decimal import Decimal

from models.menu_item import MenuItem
from models.order import Order, OrderLine
from repositories.menu_repo import MenuRepository
from repositories.order_repo import OrderRepository
from utils.logger import get_logger

logger = get_logger(__name__)

# Insertion order fixes the generated codes: Espresso=1 .. Latte=4.
MENU_ITEMS = [
    ("Espresso", "Café espresso puro e intenso", Decimal("6.50")),
    ("Cappuccino", "Café com leite vaporizado e espuma cremosa", Decimal("8.00")),
    ("Mocha", "Café com chocolate e leite vaporizado", Decimal("9.50")),
    ("Latte", "Café suave com leite vaporizado", Decimal("7.50")),
]

ORDERS = [
    (date(2025, 10, 24), 3, "Carlos Almeida"),
    (date(2025, 10, 25), 5, "Maria Silva"),
    (date(2025, 10, 25), 7, "João Pereira"),
]

# (index into ORDERS, menu item name, quantity)
ORDER_LINES = [
    (0, "Espresso", 2),
    (0, "Cappuccino", 1),
    (1, "Mocha", 1),
    (1, "Latte", 2),
    (2, "Espresso", 1),
]


def seed_data() -> dict:
    """
    Insert the fixture rows into an empty schema.

    Lines are linked through the codes the database hands back for the
    inserted orders and menu items.

    Returns:
        Dict with the inserted counts: {'menu_items', 'orders', 'order_lines'}.

    Raises:
        DatabaseOperationFailure: If any insert is rejected.
    """
    menu_repo = MenuRepository()
    order_repo = OrderRepository()

    menu = {
        name: menu_repo.add(MenuItem(name=name, description=description, unit_price=price))
        for name, description, price in MENU_ITEMS
    }
    orders = [
        order_repo.add(Order(date=day, table_number=table, customer_name=customer))
        for day, table, customer in ORDERS
    ]
    for order_index, item_name, quantity in ORDER_LINES:
        order_repo.add_line(OrderLine(
            order_code=orders[order_index].code,
            menu_item_code=menu[item_name].code,
            quantity=quantity,
        ))

    counts = {
        "menu_items": len(menu),
        "orders": len(orders),
        "order_lines": len(ORDER_LINES),
    }
    logger.info(
        f"Seeded {counts['menu_items']} menu items, {counts['orders']} orders "
        f"and {counts['order_lines']} order lines."
    )
    return counts


if __name__ == "__main__":
    from db.connection import database_session
    from db.init_db import reset_schema
    with database_session():
        reset_schema()
        seed_data()
    print("📦 Demo data inserted successfully.")

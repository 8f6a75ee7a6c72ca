"""
services/report_service.py
--------------------------
Renders the five sales reports as console text.
Each report is a numbered header, one line per result row, and a separator.
"""

from decimal import Decimal
from typing import Iterable

from config import CURRENCY_SYMBOL
from repositories.menu_repo import MenuRepository
from repositories.report_repo import ReportRepository

SEPARATOR = "-" * 46
EMPTY_REPORT = "(nenhum registro encontrado)"


class ReportService:
    """
    Runs the fixed reports over the seeded data.

    Every method issues exactly one query and returns the rendered text;
    nothing here writes to the database.
    """

    def __init__(self):
        self.menu_repo = MenuRepository()
        self.report_repo = ReportRepository()

    def list_menu(self) -> str:
        """Report 1: the whole menu, alphabetically."""
        lines = [
            f"Código: {item.code} | {item.name} - {self.format_currency(item.unit_price)}"
            f" | {item.description or ''}"
            for item in self.menu_repo.list_by_name()
        ]
        return self._section("1️⃣  LISTAGEM DO CARDÁPIO (ordenado por nome):", lines)

    def list_orders_with_lines(self) -> str:
        """Report 2: every order line with its order and menu item."""
        lines = [
            f"Comanda {row.order_code} | Data: {row.date} | Mesa: {row.table_number}"
            f" | Cliente: {row.customer_name} | Café: {row.item_name}"
            f" | Descrição: {row.item_description or ''} | Qtd: {row.quantity}"
            f" | Unit: {self.format_currency(row.unit_price)}"
            f" | Total: {self.format_currency(row.line_total)}"
            for row in self.report_repo.orders_with_lines()
        ]
        return self._section(
            "2️⃣  COMANDAS E ITENS (ordenadas por data, código e nome do café):", lines
        )

    def order_totals(self) -> str:
        """Report 3: each order with its total."""
        return self._section(
            "3️⃣  COMANDAS COM VALOR TOTAL:",
            self._order_total_lines(self.report_repo.order_totals()),
        )

    def multi_item_orders(self) -> str:
        """Report 4: orders with more than one kind of coffee."""
        return self._section(
            "4️⃣  COMANDAS COM MAIS DE UM TIPO DE CAFÉ:",
            self._order_total_lines(self.report_repo.multi_item_orders()),
        )

    def revenue_by_date(self) -> str:
        """Report 5: revenue per day."""
        lines = [
            f"Data: {row.date} | Faturamento total: {self.format_currency(row.total)}"
            for row in self.report_repo.revenue_by_date()
        ]
        return self._section("5️⃣  FATURAMENTO TOTAL POR DATA:", lines)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def format_currency(value: Decimal) -> str:
        """Two decimal places with a dot, whatever the process locale."""
        return f"{CURRENCY_SYMBOL} {value:.2f}"

    def _order_total_lines(self, rows: Iterable) -> list[str]:
        return [
            f"Comanda {row.order_code} | Data: {row.date} | Mesa: {row.table_number}"
            f" | Cliente: {row.customer_name} | TOTAL {self.format_currency(row.total)}"
            for row in rows
        ]

    @staticmethod
    def _section(title: str, lines: list[str]) -> str:
        body = lines or [EMPTY_REPORT]
        return "\n".join([title, *body, "", SEPARATOR, ""])

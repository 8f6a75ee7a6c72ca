"""
repositories/report_repo.py
---------------------------
Read-only sales queries. Joins, grouping and sums all run inside PostgreSQL;
this module only maps result rows onto report dataclasses.
"""

import psycopg2

from db.connection import get_connection, release_connection
from db.exceptions import DatabaseOperationFailure
from models.report import DailyRevenue, OrderLineDetail, OrderTotal
from utils.logger import get_logger

logger = get_logger(__name__)

_ORDER_TOTALS_SQL = """
    SELECT
        c.codigo,
        c.data,
        c.mesa,
        c.nome_cliente,
        SUM(i.quantidade * ca.preco_unitario) AS valor_total_comanda
    FROM Comanda c
    JOIN ItemComanda i ON c.codigo = i.codigo_comanda
    JOIN Cardapio ca ON i.codigo_cardapio = ca.codigo
    GROUP BY c.codigo, c.data, c.mesa, c.nome_cliente
    {having}
    ORDER BY c.data, c.codigo;
"""


class ReportRepository:
    """Repository for the aggregate sales reports."""

    def orders_with_lines(self) -> list[OrderLineDetail]:
        """
        One row per (order, line) pair with the line total.

        Returns:
            Rows ordered by date, then order code, then item name.
        """
        sql = """
            SELECT
                c.codigo AS codigo_comanda,
                c.data,
                c.mesa,
                c.nome_cliente,
                ca.nome AS nome_cafe,
                ca.descricao,
                i.quantidade,
                ca.preco_unitario,
                (i.quantidade * ca.preco_unitario) AS preco_total_cafe
            FROM Comanda c
            JOIN ItemComanda i ON c.codigo = i.codigo_comanda
            JOIN Cardapio ca ON i.codigo_cardapio = ca.codigo
            ORDER BY c.data, c.codigo, ca.nome;
        """
        return [OrderLineDetail(*row) for row in self._fetch_all(sql, "orders with lines")]

    def order_totals(self) -> list[OrderTotal]:
        """Every order that has at least one line, with its total, by date."""
        sql = _ORDER_TOTALS_SQL.format(having="")
        return [OrderTotal(*row) for row in self._fetch_all(sql, "order totals")]

    def multi_item_orders(self) -> list[OrderTotal]:
        """
        Orders with more than one line, with their totals, by date.

        Counts joined lines rather than distinct items; the two agree while
        (order, item) stays the primary key of ItemComanda.
        """
        sql = _ORDER_TOTALS_SQL.format(having="HAVING COUNT(i.codigo_cardapio) > 1")
        return [OrderTotal(*row) for row in self._fetch_all(sql, "multi-item orders")]

    def revenue_by_date(self) -> list[DailyRevenue]:
        """Total sold per distinct order date, by date."""
        sql = """
            SELECT
                c.data,
                SUM(i.quantidade * ca.preco_unitario) AS faturamento_total
            FROM Comanda c
            JOIN ItemComanda i ON c.codigo = i.codigo_comanda
            JOIN Cardapio ca ON i.codigo_cardapio = ca.codigo
            GROUP BY c.data
            ORDER BY c.data;
        """
        return [DailyRevenue(*row) for row in self._fetch_all(sql, "revenue by date")]

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _fetch_all(sql: str, report: str) -> list[tuple]:
        """Run a read-only query and return all rows."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return cur.fetchall()
        except psycopg2.Error as e:
            conn.rollback()
            logger.debug(f"Failed to query {report}: {e}")
            raise DatabaseOperationFailure.from_error(f"Failed to query {report}", e) from e
        finally:
            release_connection(conn)

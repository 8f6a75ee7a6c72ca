"""
repositories/order_repo.py
--------------------------
Data access layer for customer tabs and their lines.
All SQL queries related to the `Comanda` and `ItemComanda` tables live here.
"""

import psycopg2

from db.connection import get_connection, release_connection
from db.exceptions import DatabaseOperationFailure
from models.order import Order, OrderLine
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderRepository:
    """Repository for inserts on the Comanda and ItemComanda tables."""

    def add(self, order: Order) -> Order:
        """
        Insert a new order.

        Args:
            order: The Order domain object to persist.

        Returns:
            The same Order with its `code` populated.
        """
        sql = """
            INSERT INTO Comanda (data, mesa, nome_cliente)
            VALUES (%s, %s, %s)
            RETURNING codigo;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (order.date, order.table_number, order.customer_name))
                order.code = cur.fetchone()[0]
            conn.commit()
            logger.debug(f"Added order #{order.code} for {order.customer_name}")
            return order
        except psycopg2.Error as e:
            conn.rollback()
            logger.debug(f"Failed to add order for {order.customer_name}: {e}")
            raise DatabaseOperationFailure.from_error("Failed to add order", e) from e
        finally:
            release_connection(conn)

    def add_line(self, line: OrderLine) -> OrderLine:
        """
        Insert a line on an existing order.

        The database rejects lines whose order or menu item does not
        exist, and a second line for the same (order, item) pair.

        Raises:
            DatabaseOperationFailure: On any database error.
        """
        sql = """
            INSERT INTO ItemComanda (codigo_comanda, codigo_cardapio, quantidade)
            VALUES (%s, %s, %s);
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (line.order_code, line.menu_item_code, line.quantity))
            conn.commit()
            return line
        except psycopg2.Error as e:
            conn.rollback()
            logger.debug(
                f"Failed to add line (order #{line.order_code}, item #{line.menu_item_code}): {e}"
            )
            raise DatabaseOperationFailure.from_error("Failed to add order line", e) from e
        finally:
            release_connection(conn)

"""
repositories/menu_repo.py
-------------------------
Data access layer for the cafe menu.
All SQL queries related to the `Cardapio` table live here.
"""

import psycopg2

from db.connection import get_connection, release_connection
from db.exceptions import DatabaseOperationFailure
from models.menu_item import MenuItem
from utils.logger import get_logger

logger = get_logger(__name__)


class MenuRepository:
    """Repository for inserts and listings on the Cardapio table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, item: MenuItem) -> MenuItem:
        """
        Insert a new menu item.

        Args:
            item: The MenuItem domain object to persist.

        Returns:
            The same MenuItem with its `code` populated.

        Raises:
            DatabaseOperationFailure: On any database error, including a
                duplicate name (unique violation).
        """
        sql = """
            INSERT INTO Cardapio (nome, descricao, preco_unitario)
            VALUES (%s, %s, %s)
            RETURNING codigo;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (item.name, item.description, item.unit_price))
                item.code = cur.fetchone()[0]
            conn.commit()
            logger.debug(f"Added menu item '{item.name}' #{item.code}")
            return item
        except psycopg2.Error as e:
            conn.rollback()
            logger.debug(f"Failed to add menu item '{item.name}': {e}")
            raise DatabaseOperationFailure.from_error(
                f"Failed to add menu item '{item.name}'", e
            ) from e
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    def list_by_name(self) -> list[MenuItem]:
        """
        Fetch the whole menu.

        Returns:
            List of MenuItem objects ordered alphabetically by name.
        """
        sql = """
            SELECT codigo, nome, descricao, preco_unitario
            FROM Cardapio
            ORDER BY nome;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                return [self._row_to_item(r) for r in cur.fetchall()]
        except psycopg2.Error as e:
            conn.rollback()
            logger.debug(f"Failed to list menu: {e}")
            raise DatabaseOperationFailure.from_error("Failed to list menu", e) from e
        finally:
            release_connection(conn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_item(row: tuple) -> MenuItem:
        """Convert a database row tuple to a MenuItem domain object."""
        return MenuItem(
            code=row[0],
            name=row[1],
            description=row[2],
            unit_price=row[3],
        )

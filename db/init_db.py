"""
db/init_db.py
-------------
Drops and recreates the cafe schema. All prior data is lost.
Run this module directly to reset a database:
    python -m db.init_db
"""

import psycopg2

from db.connection import get_connection, release_connection
from db.exceptions import DatabaseOperationFailure
from utils.logger import get_logger

logger = get_logger(__name__)

# Children before parents, so foreign keys never block the drop.
DROP_SQL = """
DROP TABLE IF EXISTS ItemComanda;
DROP TABLE IF EXISTS Comanda;
DROP TABLE IF EXISTS Cardapio;
"""

SCHEMA_SQL = """
-- Menu: every coffee the cafe sells
CREATE TABLE Cardapio (
    codigo          SERIAL PRIMARY KEY,
    nome            VARCHAR(100) UNIQUE NOT NULL,
    descricao       TEXT,
    preco_unitario  DECIMAL(10,2) NOT NULL
);

-- Orders: one tab per dining party
CREATE TABLE Comanda (
    codigo          SERIAL PRIMARY KEY,
    data            DATE NOT NULL,
    mesa            INT NOT NULL,
    nome_cliente    VARCHAR(100) NOT NULL
);

-- Order lines: quantity of one menu item on one order
CREATE TABLE ItemComanda (
    codigo_comanda  INT REFERENCES Comanda(codigo),
    codigo_cardapio INT REFERENCES Cardapio(codigo),
    quantidade      INT NOT NULL,
    PRIMARY KEY (codigo_comanda, codigo_cardapio)
);
"""

TABLES = ("Cardapio", "Comanda", "ItemComanda")


def reset_schema() -> None:
    """
    Drop the three tables if present and create them again, empty.
    Safe to call multiple times (uses DROP TABLE IF EXISTS).

    Raises:
        DatabaseOperationFailure: If any statement fails; nothing is kept.
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(DROP_SQL)
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Tables created successfully.")
    except psycopg2.Error as e:
        conn.rollback()
        logger.debug(f"Failed to reset schema: {e}")
        raise DatabaseOperationFailure.from_error("Failed to reset schema", e) from e
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import database_session
    with database_session():
        reset_schema()
    print("✅ Database schema reset successfully.")

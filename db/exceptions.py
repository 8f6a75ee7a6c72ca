"""
db/exceptions.py
----------------
The single error type surfaced by the database layer.
"""

from typing import Optional


class DatabaseOperationFailure(Exception):
    """
    Raised when connecting, executing a statement, or honouring a
    constraint fails. The originating psycopg2 error is chained as
    ``__cause__``.

    Attributes:
        pgcode: PostgreSQL SQLSTATE of the underlying error, if any
            (e.g. '23503' foreign key violation, '23505' unique violation).
    """

    def __init__(self, message: str, pgcode: Optional[str] = None):
        super().__init__(message)
        self.pgcode = pgcode

    @classmethod
    def from_error(cls, action: str, error: Exception) -> "DatabaseOperationFailure":
        """Build a failure describing `action` from a driver exception."""
        return cls(f"{action}: {error}", getattr(error, "pgcode", None))

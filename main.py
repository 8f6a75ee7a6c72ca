"""
main.py
-------
Entry point for the BomGosto cafe sales reports.

Responsibilities:
    - Open the database connection (closed again on every exit path).
    - Reset the schema and load the demonstration data.
    - Print the five sales reports in order.
"""

import sys

from db.connection import database_session
from db.exceptions import DatabaseOperationFailure
from db.init_db import reset_schema
from db.seed import seed_data
from services.report_service import ReportService
from utils.logger import get_logger

logger = get_logger(__name__)


def run_reports(service: ReportService) -> None:
    """Print every report, stopping at the first failure."""
    for report in (
        service.list_menu,
        service.list_orders_with_lines,
        service.order_totals,
        service.multi_item_orders,
        service.revenue_by_date,
    ):
        print(report())


def main() -> int:
    """
    Run the whole pipeline.

    Returns:
        Process exit code: 0 after all reports succeed, 1 on a database failure.
    """
    try:
        with database_session():
            # ── 1. Schema ─────────────────────────────────
            reset_schema()

            # ── 2. Demonstration data ─────────────────────
            seed_data()

            # ── 3. Reports ────────────────────────────────
            run_reports(ReportService())
    except DatabaseOperationFailure as e:
        logger.error(f"Connection or execution error: {e}")
        return 1

    logger.info("Finished successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

import logging
from unittest.mock import MagicMock

import psycopg2
import pytest

import db.connection as connection
import main
from db.exceptions import DatabaseOperationFailure


@pytest.fixture
def pipeline(monkeypatch):
    steps = MagicMock()
    monkeypatch.setattr(connection, "init_pool", steps.init_pool)
    monkeypatch.setattr(connection, "close_pool", steps.close_pool)
    monkeypatch.setattr(main, "reset_schema", steps.reset_schema)
    monkeypatch.setattr(main, "seed_data", steps.seed_data)
    monkeypatch.setattr(main, "ReportService", lambda: steps.service)
    return steps


def test_runs_every_step_in_order(pipeline, capsys):
    for name in ("list_menu", "list_orders_with_lines", "order_totals",
                 "multi_item_orders", "revenue_by_date"):
        getattr(pipeline.service, name).return_value = f"<{name}>"

    assert main.main() == 0

    called = [c[0] for c in pipeline.mock_calls]
    assert called == [
        "init_pool", "reset_schema", "seed_data",
        "service.list_menu", "service.list_orders_with_lines", "service.order_totals",
        "service.multi_item_orders", "service.revenue_by_date",
        "close_pool",
    ]
    out = capsys.readouterr().out
    assert out.index("<list_menu>") < out.index("<revenue_by_date>")


def test_failure_stops_the_sequence_and_closes_connection(pipeline):
    pipeline.seed_data.side_effect = DatabaseOperationFailure("foreign key violation")

    assert main.main() == 1

    pipeline.service.list_menu.assert_not_called()
    pipeline.close_pool.assert_called_once()


def test_connection_failure_exits_non_zero(pipeline):
    pipeline.init_pool.side_effect = DatabaseOperationFailure("could not connect")

    assert main.main() == 1

    pipeline.reset_schema.assert_not_called()


def test_failure_emits_a_single_error_record(fake_db, monkeypatch, caplog):
    monkeypatch.setattr(connection, "init_pool", MagicMock())
    monkeypatch.setattr(connection, "close_pool", MagicMock())
    fake_db.cursor.execute.side_effect = psycopg2.ProgrammingError("permission denied")

    with caplog.at_level(logging.DEBUG):
        assert main.main() == 1

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].name == "main"
    assert "permission denied" in errors[0].getMessage()

from itertools import count
from unittest.mock import MagicMock

import pytest

import db.seed as seed
from db.exceptions import DatabaseOperationFailure


def _assign_codes():
    codes = count(1)

    def add(entity):
        entity.code = next(codes)
        return entity

    return add


def test_seed_links_lines_to_returned_codes(monkeypatch):
    menu_repo = MagicMock()
    menu_repo.add.side_effect = _assign_codes()
    order_repo = MagicMock()
    order_repo.add.side_effect = _assign_codes()
    monkeypatch.setattr(seed, "MenuRepository", lambda: menu_repo)
    monkeypatch.setattr(seed, "OrderRepository", lambda: order_repo)

    counts = seed.seed_data()

    assert counts == {"menu_items": 4, "orders": 3, "order_lines": 5}
    names = [c.args[0].name for c in menu_repo.add.call_args_list]
    assert names == ["Espresso", "Cappuccino", "Mocha", "Latte"]
    lines = [
        (c.args[0].order_code, c.args[0].menu_item_code, c.args[0].quantity)
        for c in order_repo.add_line.call_args_list
    ]
    assert lines == [(1, 1, 2), (1, 2, 1), (2, 3, 1), (2, 4, 2), (3, 1, 1)]


def test_seed_stops_at_first_rejected_insert(monkeypatch):
    menu_repo = MagicMock()
    menu_repo.add.side_effect = DatabaseOperationFailure("duplicate key")
    order_repo = MagicMock()
    monkeypatch.setattr(seed, "MenuRepository", lambda: menu_repo)
    monkeypatch.setattr(seed, "OrderRepository", lambda: order_repo)

    with pytest.raises(DatabaseOperationFailure):
        seed.seed_data()

    menu_repo.add.assert_called_once()
    order_repo.add.assert_not_called()

from __future__ import annotations

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from reception_hierarchy.data_model import (
    GroupNode,
    HierarchyLevel,
    IToDict,
    ReceptionHeader,
    Totals,
    TransactionType,
)


# ------------------------------ TransactionType -------------------------------


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Доходы", TransactionType.INCOME),
        ("Расходы", TransactionType.EXPENSE),
        ("  доходы ", TransactionType.INCOME),
        ("Income", TransactionType.INCOME),
        ("EXPENSE", TransactionType.EXPENSE),
        (TransactionType.EXPENSE, TransactionType.EXPENSE),
    ],
)
def test_transaction_type_from_value(value, expected):
    assert TransactionType.from_value(value) is expected


@pytest.mark.parametrize("value", ["", None, "Возврат", 1])
def test_transaction_type_from_value_rejects_unknown(value):
    with pytest.raises(ValueError):
        TransactionType.from_value(value)


def test_transaction_type_arrows():
    assert TransactionType.INCOME.arrow == "↗"
    assert TransactionType.EXPENSE.arrow == "↘"
    assert TransactionType.INCOME.is_income and not TransactionType.EXPENSE.is_income


# ---------------------------------- Totals ------------------------------------


def test_totals_net_and_addition():
    a = Totals(Decimal("100"), Decimal("-40"))
    b = Totals(Decimal("5"), Decimal("-5"))

    assert a.net == Decimal("60")
    assert a + b == Totals(Decimal("105"), Decimal("-45"))
    assert Totals.combine([a, b]) == a + b
    assert Totals.combine([]) == Totals()


def test_totals_to_dict_uses_strings():
    assert Totals(Decimal("1.50"), Decimal("-0.50")).to_dict() == {
        "income": "1.50",
        "expense": "-0.50",
        "net": "1.00",
    }


# ------------------------------ TransactionRow --------------------------------


def test_transaction_row_is_immutable(make_row):
    row = make_row(0)
    with pytest.raises(FrozenInstanceError):
        setattr(row, "price", Decimal("1"))


def test_transaction_row_to_dict(make_row):
    row = make_row(3, position=2, item="Gasket_ID_1", quantity="2", price="500")
    data = row.to_dict()
    assert isinstance(row, IToDict)
    assert data["idx"] == 3
    assert data["positionNumber"] == 2
    assert data["transactionType"] == "Доходы"
    assert data["price"] == "500"


def test_transaction_row_to_dict_keeps_unknown_direction_literal(make_row):
    assert make_row(0, direction="Возврат").to_dict()["transactionType"] == "Возврат"
    assert make_row(1, direction=None).to_dict()["transactionType"] is None


# -------------------------------- GroupNode -----------------------------------


def test_group_node_leaf_exposes_items(make_row):
    rows = (make_row(0), make_row(1))
    leaf = GroupNode(
        level=HierarchyLevel.DIRECTION,
        key=TransactionType.INCOME,
        totals=Totals(Decimal("200")),
        rows=rows,
    )

    assert leaf.is_leaf
    assert leaf.items == rows
    assert leaf.label == "Доходы"
    assert leaf.first_row is rows[0]
    assert list(leaf.walk()) == [leaf]


def test_group_node_branch_has_no_items_and_finds_children(make_row):
    rows = (make_row(0),)
    leaf = GroupNode(HierarchyLevel.DIRECTION, TransactionType.INCOME, Totals(Decimal("100")), rows)
    branch = GroupNode(HierarchyLevel.BASE_ITEM, "Gasket", Totals(Decimal("100")), rows, (leaf,))

    assert branch.items == ()
    assert branch.child(TransactionType.INCOME) is leaf
    assert branch.child(TransactionType.EXPENSE) is None
    assert list(branch.walk()) == [branch, leaf]
    assert branch.income_total == Decimal("100")
    assert branch.net_total == Decimal("100")


def test_group_node_to_dict_shapes(make_row):
    rows = (make_row(0),)
    leaf = GroupNode(HierarchyLevel.DIRECTION, TransactionType.INCOME, Totals(Decimal("100")), rows)
    position = GroupNode(HierarchyLevel.POSITION, 4, Totals(Decimal("100")), rows, (leaf,))

    data = position.to_dict()

    assert data["level"] == "position"
    assert data["key"] == 4
    assert data["children"][0]["key"] == "Доходы"
    assert len(data["children"][0]["items"]) == 1


def test_header_from_row(make_row):
    row = make_row(0, reception_number="R-1", reception_date="02.01.2025", counterparty_name="ACME")
    header = ReceptionHeader.from_row(row)
    assert header == ReceptionHeader("R-1", "02.01.2025", "ACME")
    assert header.to_dict()["receptionNumber"] == "R-1"

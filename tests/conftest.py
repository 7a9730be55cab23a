from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import pytest

from reception_hierarchy.data_model import TransactionRow, TransactionType

INCOME = TransactionType.INCOME
EXPENSE = TransactionType.EXPENSE


def mk_row(
    idx: int,
    position: Any = 1,
    work_group: str = "Repair",
    item: str = "Gasket",
    direction: TransactionType = INCOME,
    quantity: Any = "1",
    price: Any = "100",
    **extra: Any,
) -> TransactionRow:
    """Small helper to create a TransactionRow quickly for tests."""
    return TransactionRow(
        idx=idx,
        position_number=position,
        work_group=work_group,
        item_name=item,
        transaction_type=direction,
        quantity=_num(quantity),
        price=_num(price),
        **extra,
    )


def _num(value: Any) -> Any:
    if isinstance(value, str):
        try:
            return Decimal(value)
        except InvalidOperation:
            return value
    return value


@pytest.fixture
def make_row():
    return mk_row

# reception_hierarchy/controllers/aggregation.py
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from reception_hierarchy.data_model import (
    GroupNode,
    HierarchyLevel,
    Totals,
    TransactionRow,
    TransactionType,
)

_ZERO = Decimal("0")


def direction_of(row: TransactionRow) -> Optional[TransactionType]:
    """Row direction, or ``None`` when the type is missing or unrecognised."""
    try:
        return TransactionType.from_value(row.transaction_type)
    except ValueError:
        return None


def amount_value(value: Any) -> Decimal:
    """Read a quantity or price as a finite Decimal.

    Only numbers and plain decimal literals (``"12.5"``, ``"-3"``) are read.
    Text the loader could not normalise, such as ``"12.03.2024"`` or
    ``"abc1"``, raises ``ValueError`` instead of being mined for digits.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not an amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"Not an amount: {value!r}") from e
    else:
        raise ValueError(f"Not an amount: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Non-finite amount: {value!r}")
    return result


def _quantity_price(row: TransactionRow) -> Tuple[Decimal, Decimal]:
    return amount_value(row.quantity), amount_value(row.price)


def line_amount(row: TransactionRow) -> Decimal:
    """Return ``quantity × price`` for a row.

    A quantity or price that cannot be read as a finite number makes the row
    count as zero.
    """
    try:
        quantity, price = _quantity_price(row)
    except ValueError:
        return _ZERO
    return quantity * price


def expense_amount(row: TransactionRow) -> Decimal:
    """Return ``-(quantity × |price|)`` for an expense row (zero if unreadable)."""
    try:
        quantity, price = _quantity_price(row)
    except ValueError:
        return _ZERO
    return -(quantity * abs(price))


def has_readable_amount(row: TransactionRow) -> bool:
    try:
        _quantity_price(row)
    except ValueError:
        return False
    return True


def has_known_direction(row: TransactionRow) -> bool:
    return direction_of(row) is not None


def split_by_direction(
    rows: Iterable[TransactionRow],
) -> Tuple[List[TransactionRow], List[TransactionRow]]:
    """Return ``(income_rows, expense_rows)``, each in original order.

    Rows without a recognised direction are in neither list.
    """
    income: List[TransactionRow] = []
    expense: List[TransactionRow] = []
    for row in rows:
        direction = direction_of(row)
        if direction is TransactionType.INCOME:
            income.append(row)
        elif direction is TransactionType.EXPENSE:
            expense.append(row)
    return income, expense


def compute_totals(rows: Iterable[TransactionRow]) -> Totals:
    """Compute income, expense and net totals for a set of rows.

    Income rows add ``quantity × price`` as stored. Expense rows add
    ``-(quantity × |price|)``: the price counts as a cost whether the sheet
    stores it positive or negative, while the quantity keeps its sign so a
    returned item (negative quantity) reduces the expense. Rows without a
    recognised direction contribute nothing.

    Pure: the same rows always give the same Totals, whatever level asks.
    """
    income, expense = split_by_direction(rows)
    return Totals(
        income=sum((line_amount(r) for r in income), _ZERO),
        expense=sum((expense_amount(r) for r in expense), _ZERO),
    )


def direction_nodes(rows: Sequence[TransactionRow]) -> Tuple[GroupNode, ...]:
    """Build the income node then the expense node for one base item.

    A direction without rows produces no node.
    """
    nodes: List[GroupNode] = []
    for direction, subset in zip(
        (TransactionType.INCOME, TransactionType.EXPENSE), split_by_direction(rows)
    ):
        if not subset:
            continue
        nodes.append(
            GroupNode(
                level=HierarchyLevel.DIRECTION,
                key=direction,
                totals=compute_totals(subset),
                rows=tuple(subset),
            )
        )
    return tuple(nodes)

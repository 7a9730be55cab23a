# reception_hierarchy/data_model/reception/transaction_row.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..interfaces import RecursiveDict, TransactionType


@dataclass(frozen=True)
class TransactionRow:
    """
    One line of a reception workbook.

    ``position_number``, ``work_group`` and ``item_name`` drive grouping;
    ``quantity`` and ``price`` drive the totals. The remaining text fields are
    only carried through for headers. Cells the loader could not read as
    numbers are kept as their literal value so that aggregation can count them
    as zero instead of failing.
    """

    position_number: Any  # int for well-formed sheets; groups rows of one unit
    work_group: str
    item_name: str
    transaction_type: TransactionType
    quantity: Decimal
    price: Decimal
    service_name: str = ""
    subdivision_name: str = ""
    reception_number: str = ""
    reception_date: str = ""
    counterparty_name: str = ""
    idx: int = -1  # 0-based row index from the sheet (after header)

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    def to_dict(self) -> dict[str, RecursiveDict]:
        direction = self.transaction_type
        return {
            "idx": self.idx,
            "positionNumber": _plain(self.position_number),
            "workGroup": self.work_group,
            "itemName": self.item_name,
            "transactionType": (
                direction.value
                if isinstance(direction, TransactionType)
                else _plain(direction)
            ),
            "quantity": _plain(self.quantity),
            "price": _plain(self.price),
            "serviceName": self.service_name,
            "subdivisionName": self.subdivision_name,
        }


def _plain(value: Any) -> RecursiveDict:
    if value is None or isinstance(value, (int, str)):
        return value
    return str(value)

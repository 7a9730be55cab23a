# reception_hierarchy/data_model/interfaces/enum_transaction_type.py
from __future__ import annotations

from enum import Enum
from typing import Any


class TransactionType(Enum):
    """
    Direction of a reception row, valued with the labels used in the workbook.
    """

    INCOME = "Доходы"
    EXPENSE = "Расходы"

    @property
    def is_income(self) -> bool:
        return self is TransactionType.INCOME

    @property
    def arrow(self) -> str:
        return "↗" if self.is_income else "↘"

    @classmethod
    def from_value(cls, value: Any) -> "TransactionType":
        """
        Convert a workbook label (or English alias) to a TransactionType.

        Matching ignores surrounding whitespace and case.
        """
        if isinstance(value, TransactionType):
            return value
        text = "" if value is None else str(value).strip().casefold()
        for member in cls:
            if text == member.value.casefold():
                return member
        alias = _ALIASES.get(text)
        if alias is not None:
            return cls[alias]
        raise ValueError(f"Unknown transaction type: {value!r}")


_ALIASES = {
    "income": "INCOME",
    "доход": "INCOME",
    "expense": "EXPENSE",
    "expenses": "EXPENSE",
    "расход": "EXPENSE",
}

# reception_hierarchy/data_model/reception/totals.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from ..interfaces import RecursiveDict

_ZERO = Decimal("0")


@dataclass(frozen=True)
class Totals:
    """
    Income/expense sums for one group of rows.

    ``expense`` is a signed sum where costs are negative (returns make it
    less negative), so the net result is always ``income + expense``.
    """

    income: Decimal = _ZERO
    expense: Decimal = _ZERO

    @property
    def net(self) -> Decimal:
        return self.income + self.expense

    def __add__(self, other: object) -> Totals:
        if not isinstance(other, Totals):
            return NotImplemented
        return Totals(self.income + other.income, self.expense + other.expense)

    @classmethod
    def combine(cls, parts: Iterable[Totals]) -> Totals:
        """Sum several Totals (empty input gives zero totals)."""
        result = cls()
        for part in parts:
            result = result + part
        return result

    def to_dict(self) -> dict[str, RecursiveDict]:
        return {
            "income": str(self.income),
            "expense": str(self.expense),
            "net": str(self.net),
        }

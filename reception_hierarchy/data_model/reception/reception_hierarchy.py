# reception_hierarchy/data_model/reception/reception_hierarchy.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from ..interfaces import RecursiveDict
from .group_node import GroupNode
from .totals import Totals
from .transaction_row import TransactionRow


@dataclass(frozen=True)
class ReceptionHeader:
    """Reception-level details, copied verbatim from the first row."""

    reception_number: str
    reception_date: str
    counterparty_name: str

    @classmethod
    def from_row(cls, row: TransactionRow) -> ReceptionHeader:
        return cls(
            reception_number=row.reception_number,
            reception_date=row.reception_date,
            counterparty_name=row.counterparty_name,
        )

    def to_dict(self) -> dict[str, RecursiveDict]:
        return {
            "receptionNumber": self.reception_number,
            "receptionDate": self.reception_date,
            "counterpartyName": self.counterparty_name,
        }


@dataclass(frozen=True)
class ReceptionHierarchy:
    """Root of the tree: header, document totals and the sorted positions."""

    header: ReceptionHeader
    totals: Totals
    positions: Tuple[GroupNode, ...]

    @property
    def position_count(self) -> int:
        return len(self.positions)

    def position(self, number: Any) -> Optional[GroupNode]:
        for node in self.positions:
            if node.key == number:
                return node
        return None

    def walk(self) -> Iterator[GroupNode]:
        for node in self.positions:
            yield from node.walk()

    def leaf_rows(self) -> Iterator[TransactionRow]:
        """Every row in display order, read from the direction nodes."""
        for node in self.walk():
            yield from node.items

    def to_dict(self) -> dict[str, RecursiveDict]:
        return {
            "header": self.header.to_dict(),
            "totals": self.totals.to_dict(),
            "positions": [node.to_dict() for node in self.positions],
        }

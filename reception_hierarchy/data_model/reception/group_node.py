# reception_hierarchy/data_model/reception/group_node.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterator, Optional, Tuple

from ..interfaces import HierarchyLevel, RecursiveDict, TransactionType
from .totals import Totals
from .transaction_row import TransactionRow


@dataclass(frozen=True)
class GroupNode:
    """
    One node of the reception tree; the same shape is used at every level.

    ``rows`` holds every row owned by the node in original order and is what
    ``totals`` was computed from. ``children`` holds the next level down and is
    empty for direction nodes, whose rows are the displayed line items.
    """

    level: HierarchyLevel
    key: Any
    totals: Totals
    rows: Tuple[TransactionRow, ...]
    children: Tuple[GroupNode, ...] = ()

    @property
    def income_total(self) -> Decimal:
        return self.totals.income

    @property
    def expense_total(self) -> Decimal:
        return self.totals.expense

    @property
    def net_total(self) -> Decimal:
        return self.totals.net

    @property
    def is_leaf(self) -> bool:
        return self.level.is_leaf

    @property
    def items(self) -> Tuple[TransactionRow, ...]:
        """Line items of a direction node; empty for higher levels."""
        return self.rows if self.is_leaf else ()

    @property
    def first_row(self) -> Optional[TransactionRow]:
        return self.rows[0] if self.rows else None

    @property
    def label(self) -> str:
        if isinstance(self.key, TransactionType):
            return self.key.value
        return "" if self.key is None else str(self.key)

    def child(self, key: Any) -> Optional[GroupNode]:
        for node in self.children:
            if node.key == key:
                return node
        return None

    def walk(self) -> Iterator[GroupNode]:
        """Yield this node and its descendants depth-first, in display order."""
        yield self
        for node in self.children:
            yield from node.walk()

    def to_dict(self) -> dict[str, RecursiveDict]:
        data: dict[str, RecursiveDict] = {
            "level": self.level.name.lower(),
            "key": self.label if not isinstance(self.key, int) else self.key,
            "totals": self.totals.to_dict(),
        }
        if self.is_leaf:
            data["items"] = [row.to_dict() for row in self.rows]
        else:
            data["children"] = [node.to_dict() for node in self.children]
        return data

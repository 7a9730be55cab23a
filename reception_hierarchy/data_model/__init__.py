from .interfaces import HierarchyLevel, IToDict, TransactionType
from .reception import (
    GroupNode,
    ReceptionHeader,
    ReceptionHierarchy,
    Totals,
    TransactionRow,
)

__all__ = [
    "HierarchyLevel",
    "IToDict",
    "TransactionType",
    "GroupNode",
    "ReceptionHeader",
    "ReceptionHierarchy",
    "Totals",
    "TransactionRow",
]

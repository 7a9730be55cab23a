"""
Reception hierarchy: groups reception workbook rows into
position → work group → base item → income/expense, with totals at each level.
"""

from reception_hierarchy.controllers import (
    TotalsMismatchError,
    base_item_name,
    build_hierarchy,
    compute_totals,
    load_reception_rows,
)
from reception_hierarchy.data_model import (
    GroupNode,
    HierarchyLevel,
    ReceptionHeader,
    ReceptionHierarchy,
    Totals,
    TransactionRow,
    TransactionType,
)

__all__ = [
    "base_item_name",
    "build_hierarchy",
    "compute_totals",
    "load_reception_rows",
    "TotalsMismatchError",
    "GroupNode",
    "HierarchyLevel",
    "ReceptionHeader",
    "ReceptionHierarchy",
    "Totals",
    "TransactionRow",
    "TransactionType",
]

# reception_hierarchy/data_model/reception/__init__.py
from .group_node import GroupNode
from .reception_hierarchy import ReceptionHeader, ReceptionHierarchy
from .totals import Totals
from .transaction_row import TransactionRow

__all__ = [
    "TransactionRow",
    "Totals",
    "GroupNode",
    "ReceptionHeader",
    "ReceptionHierarchy",
]

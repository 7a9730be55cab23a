# reception_hierarchy/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the reception data model.
"""

from .enum_hierarchy_level import HierarchyLevel
from .enum_transaction_type import TransactionType
from .i_to_dict import IToDict, RecursiveDict

__all__ = [
    "HierarchyLevel",
    "TransactionType",
    "IToDict",
    "RecursiveDict",
]

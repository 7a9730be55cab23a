# reception_hierarchy/data_model/interfaces/enum_hierarchy_level.py
from enum import IntEnum


class HierarchyLevel(IntEnum):
    """Depth of a GroupNode in the reception tree (outermost first)."""

    POSITION = 1
    WORK_GROUP = 2
    BASE_ITEM = 3
    DIRECTION = 4

    @property
    def is_leaf(self) -> bool:
        return self is HierarchyLevel.DIRECTION

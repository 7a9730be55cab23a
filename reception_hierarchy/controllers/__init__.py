from .aggregation import (
    amount_value,
    compute_totals,
    direction_nodes,
    line_amount,
    split_by_direction,
)
from .grouping import (
    base_item_name,
    group_by_base_item,
    group_by_position,
    group_by_work_group,
    group_first_seen,
)
from .hierarchy_builder import TotalsMismatchError, build_hierarchy
from .reception_loader import (
    DEFAULT_COLUMNS,
    load_reception_rows,
    rows_from_frame,
    rows_from_records,
)

__all__ = [
    "amount_value",
    "base_item_name",
    "build_hierarchy",
    "compute_totals",
    "direction_nodes",
    "group_by_base_item",
    "group_by_position",
    "group_by_work_group",
    "group_first_seen",
    "line_amount",
    "split_by_direction",
    "TotalsMismatchError",
    "DEFAULT_COLUMNS",
    "load_reception_rows",
    "rows_from_frame",
    "rows_from_records",
]

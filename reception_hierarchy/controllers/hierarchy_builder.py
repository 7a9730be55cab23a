"""
Reception hierarchy builder.

Turns a flat list of reception rows into the nested view
position → work group → base item → direction → line items.

Every node's totals are recomputed from the rows that node owns (via
:func:`compute_totals`) and then compared with the sum of its children's
totals; the two must agree exactly.
"""

# reception_hierarchy/controllers/hierarchy_builder.py
from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence, Tuple

from reception_hierarchy.controllers.aggregation import (
    compute_totals,
    direction_nodes,
    has_known_direction,
    has_readable_amount,
)
from reception_hierarchy.controllers.grouping import (
    group_by_base_item,
    group_by_position,
    group_by_work_group,
)
from reception_hierarchy.data_model import (
    GroupNode,
    HierarchyLevel,
    ReceptionHeader,
    ReceptionHierarchy,
    Totals,
    TransactionRow,
)

log = logging.getLogger(__name__)


class TotalsMismatchError(ValueError):
    """A node's own totals disagree with the sum of its children's totals."""

    def __init__(self, where: str, own: Totals, rolled_up: Totals) -> None:
        super().__init__(
            f"Totals mismatch at {where}: own={own.to_dict()} "
            f"children={rolled_up.to_dict()}"
        )
        self.where = where
        self.own = own
        self.rolled_up = rolled_up


def _check_rollup(where: str, own: Totals, children: Sequence[GroupNode]) -> None:
    rolled_up = Totals.combine(node.totals for node in children)
    if own != rolled_up:
        log.error("Totals mismatch at %s", where)
        raise TotalsMismatchError(where, own, rolled_up)


def _make_node(
    level: HierarchyLevel,
    key: Any,
    rows: Sequence[TransactionRow],
    children: Tuple[GroupNode, ...],
) -> GroupNode:
    totals = compute_totals(rows)
    _check_rollup(f"{level.name.lower()} {key!r}", totals, children)
    return GroupNode(
        level=level, key=key, totals=totals, rows=tuple(rows), children=children
    )


def build_base_item_node(base_name: str, rows: Sequence[TransactionRow]) -> GroupNode:
    return _make_node(HierarchyLevel.BASE_ITEM, base_name, rows, direction_nodes(rows))


def build_work_group_node(work_group: str, rows: Sequence[TransactionRow]) -> GroupNode:
    children = tuple(
        build_base_item_node(name, items) for name, items in group_by_base_item(rows)
    )
    return _make_node(HierarchyLevel.WORK_GROUP, work_group, rows, children)


def build_position_node(number: Any, rows: Sequence[TransactionRow]) -> GroupNode:
    children = tuple(
        build_work_group_node(label, items)
        for label, items in group_by_work_group(rows)
    )
    return _make_node(HierarchyLevel.POSITION, number, rows, children)


def build_hierarchy(rows: Iterable[TransactionRow]) -> Optional[ReceptionHierarchy]:
    """Build the reception tree for ``rows``.

    Parameters
    ----------
    rows : Iterable[TransactionRow]
        Reception rows in sheet order. The input is not modified.

    Returns
    -------
    Optional[ReceptionHierarchy]
        ``None`` when there are no rows (the "no data" result); otherwise the
        header taken from the first row, the document totals and the
        positions sorted by ascending number.

    Raises
    ------
    TotalsMismatchError
        If a node's recomputed totals disagree with its children's totals.
    """
    rows = list(rows)
    if not rows:
        log.debug("No reception rows; nothing to group")
        return None

    unreadable = [r for r in rows if not has_readable_amount(r)]
    if unreadable:
        log.warning(
            "%d row(s) with unreadable quantity/price counted as zero (sheet rows %s)",
            len(unreadable),
            ", ".join(str(r.idx) for r in unreadable[:10]),
        )
    undirected = [r for r in rows if not has_known_direction(r)]
    if undirected:
        log.warning(
            "%d row(s) with unknown transaction type left out of the totals (sheet rows %s)",
            len(undirected),
            ", ".join(str(r.idx) for r in undirected[:10]),
        )

    positions = tuple(
        build_position_node(number, items) for number, items in group_by_position(rows)
    )
    totals = compute_totals(rows)
    _check_rollup("document", totals, positions)

    log.debug(
        "Grouped %d rows into %d position(s), %d node(s)",
        len(rows),
        len(positions),
        sum(1 for p in positions for _ in p.walk()),
    )
    return ReceptionHierarchy(
        header=ReceptionHeader.from_row(rows[0]),
        totals=totals,
        positions=positions,
    )

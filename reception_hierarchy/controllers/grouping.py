"""
Grouping helpers for reception rows.

All three grouping levels share :func:`group_first_seen`: buckets are keyed by
equality and listed in the order their key was first met while scanning the
rows top to bottom. Only the position level is re-sorted afterwards.
"""

# reception_hierarchy/controllers/grouping.py
from __future__ import annotations

from decimal import Decimal
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Sequence,
    Tuple,
    TypeVar,
)

from reception_hierarchy.data_model import TransactionRow

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

BASE_ITEM_DELIMITER = "_ID_"


def group_first_seen(
    items: Iterable[T], key: Callable[[T], K]
) -> List[Tuple[K, List[T]]]:
    """Group ``items`` by ``key`` keeping first-seen key order.

    Items inside each bucket keep their original relative order.

    Examples
    --------
    >>> group_first_seen(["b1", "a1", "b2"], key=lambda s: s[0])
    [('b', ['b1', 'b2']), ('a', ['a1'])]
    """
    buckets: Dict[K, List[T]] = {}
    for item in items:
        buckets.setdefault(key(item), []).append(item)
    return list(buckets.items())


def base_item_name(item_name: Any) -> str:
    """Strip the instance suffix from an item name.

    ``"Engine block_ID_001"`` → ``"Engine block"``. Names without the delimiter
    are only trimmed. Only the first delimiter counts, so a name carrying
    ``_ID_`` as data is truncated as well.
    """
    text = "" if item_name is None else str(item_name)
    return text.split(BASE_ITEM_DELIMITER, 1)[0].strip()


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return value == value  # NaN
    return isinstance(value, int)


def _position_sort_key(number: Any) -> Tuple[int, Any, str]:
    # Numbers first in numeric order, anything else after them by text.
    if _is_number(number):
        return (0, number, "")
    return (1, 0, str(number))


def _position_identity(number: Any) -> Tuple[bool, Any]:
    # True == 1 for dict keys; a boolean cell must not join position 1
    return (isinstance(number, bool), number)


def group_by_position(
    rows: Sequence[TransactionRow],
) -> List[Tuple[Any, List[TransactionRow]]]:
    """Partition rows by ``position_number``, sorted by ascending position.

    Keys are deduplicated by equality (``1``, ``1.0`` and ``Decimal("1")`` share
    a group) except that booleans never merge with numbers; each group is
    keyed by the first value seen.
    """
    buckets = group_first_seen(rows, key=lambda r: _position_identity(r.position_number))
    groups = [(items[0].position_number, items) for _, items in buckets]
    # sorted() is stable, so equal sort keys keep first-seen order
    return sorted(groups, key=lambda g: _position_sort_key(g[0]))


def group_by_work_group(
    rows: Sequence[TransactionRow],
) -> List[Tuple[str, List[TransactionRow]]]:
    """Partition one position's rows by exact ``work_group`` label, first-seen."""
    return group_first_seen(rows, key=lambda r: r.work_group)


def group_by_base_item(
    rows: Sequence[TransactionRow],
) -> List[Tuple[str, List[TransactionRow]]]:
    """Partition one work group's rows by :func:`base_item_name`, first-seen."""
    return group_first_seen(rows, key=lambda r: base_item_name(r.item_name))

# reception_hierarchy/views/outline.py
from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from reception_hierarchy.data_model import (
    GroupNode,
    HierarchyLevel,
    ReceptionHierarchy,
    Totals,
    TransactionType,
)

from .expansion_state import ExpansionState, NodePath

NO_DATA_MESSAGE = "Нет данных для отображения. Загрузите Excel файл."
CURRENCY = "₽"
_NBSP = "\u00a0"
_INDENT = "    "


def format_amount(value: Decimal) -> str:
    """Format like ``toLocaleString('ru-RU')``: NBSP thousands, comma decimals.

    Up to three fraction digits are shown, trailing zeros dropped.
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text.replace(",", _NBSP).replace(".", ",")


def format_totals(totals: Totals) -> str:
    return (
        f"↗ {format_amount(totals.income)} {CURRENCY}  "
        f"↘ {format_amount(-totals.expense)} {CURRENCY}  "
        f"= {format_amount(totals.net)} {CURRENCY}"
    )


def _node_title(node: GroupNode) -> str:
    if node.level is HierarchyLevel.POSITION:
        first = node.first_row
        service = first.service_name if first else ""
        subdivision = first.subdivision_name if first else ""
        details = " / ".join(part for part in (service, subdivision) if part)
        return f"[{node.label}] {details}".rstrip()
    if node.level is HierarchyLevel.DIRECTION:
        direction: TransactionType = node.key
        amount = node.income_total if direction.is_income else node.expense_total
        sign = "-" if amount < 0 else "+"
        return (
            f"{direction.arrow} {direction.value}  "
            f"{sign} {format_amount(abs(amount))} {CURRENCY}"
        )
    return node.label


def _render_node(
    node: GroupNode,
    parent: NodePath,
    state: ExpansionState,
    depth: int,
    lines: List[str],
) -> None:
    path = parent + (node.key,)
    expanded = state.is_expanded(path)
    marker = "▾" if expanded else "▸"
    pad = _INDENT * depth
    if node.is_leaf:
        lines.append(f"{pad}{marker} {_node_title(node)}")
    else:
        lines.append(f"{pad}{marker} {_node_title(node)}  {format_totals(node.totals)}")
    if not expanded:
        return
    if node.is_leaf:
        for row in node.items:
            lines.append(f"{pad}{_INDENT}  {row.item_name}  {row.quantity}")
        return
    for child in node.children:
        _render_node(child, path, state, depth + 1, lines)


def render_outline(
    hierarchy: Optional[ReceptionHierarchy],
    state: Optional[ExpansionState] = None,
) -> str:
    """Render the reception tree as indented text.

    ``None`` (no rows) renders the fallback message. Collapsed nodes are shown
    without their children.
    """
    if hierarchy is None:
        return NO_DATA_MESSAGE
    state = state or ExpansionState()
    header = hierarchy.header
    lines = [
        "Информация о приемке",
        f"  Номер приемки: {header.reception_number}",
        f"  Дата приемки: {header.reception_date}",
        f"  Контрагент: {header.counterparty_name}",
        "",
        f"Двигатели ({hierarchy.position_count})  {format_totals(hierarchy.totals)}",
    ]
    for position in hierarchy.positions:
        _render_node(position, (), state, 0, lines)
    return "\n".join(lines)

"""
Reception workbook loading.

Reads the reception sheet with pandas and turns each line into a typed
:class:`TransactionRow`. Only the grouping and amount columns are required;
header columns (service, subdivision, reception number/date, counterparty)
default to empty text when absent.
"""

# reception_hierarchy/controllers/reception_loader.py
from __future__ import annotations

import logging
import re
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd

from reception_hierarchy.data_model import TransactionRow, TransactionType
from reception_hierarchy.utilities import (
    is_null_or_whitespace,
    to_display_date,
    to_finite_decimal,
    to_int,
    to_str,
)

log = logging.getLogger(__name__)

# TransactionRow field -> sheet header
DEFAULT_COLUMNS: Dict[str, str] = {
    "position_number": "positionNumber",
    "work_group": "workGroup",
    "item_name": "itemName",
    "transaction_type": "transactionType",
    "quantity": "quantity",
    "price": "price",
    "service_name": "serviceName",
    "subdivision_name": "subdivisionName",
    "reception_number": "receptionNumber",
    "reception_date": "receptionDate",
    "counterparty_name": "counterpartyName",
}

_INTEGRAL_TEXT = re.compile(r"[+-]?\d+(\.0*)?")

REQUIRED_FIELDS = (
    "position_number",
    "work_group",
    "item_name",
    "transaction_type",
    "quantity",
    "price",
)


def resolve_columns(columns: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Merge a partial field → header mapping over :data:`DEFAULT_COLUMNS`."""
    merged = dict(DEFAULT_COLUMNS)
    if columns:
        unknown = sorted(set(columns) - set(DEFAULT_COLUMNS))
        if unknown:
            raise ValueError(f"Unknown reception fields in column mapping: {unknown}")
        merged.update(columns)
    return merged


def load_reception_rows(
    path: Path,
    columns: Optional[Mapping[str, str]] = None,
    sheet_name: Union[int, str] = 0,
) -> List[TransactionRow]:
    """Load a reception workbook into rows.

    Parameters
    ----------
    path : Path
        Workbook path (``.xlsx`` read through openpyxl; ``.csv`` also accepted).
    columns : Mapping[str, str], optional
        Overrides for :data:`DEFAULT_COLUMNS`.
    sheet_name : int | str
        Sheet to read from a workbook.

    Returns
    -------
    List[TransactionRow]
        One row per non-header line, in sheet order.

    Raises
    ------
    ValueError
        If a required column is missing or a transaction type is unknown.
    """
    path = Path(path)
    log.info("Loading reception sheet: %s", path)
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path)
    else:
        df = pd.read_excel(path, sheet_name=sheet_name)
    rows = rows_from_frame(df, columns)
    log.debug("Loaded %d reception rows from %s", len(rows), path)
    return rows


def rows_from_frame(
    df: pd.DataFrame, columns: Optional[Mapping[str, str]] = None
) -> List[TransactionRow]:
    mapping = resolve_columns(columns)
    missing = [mapping[f] for f in REQUIRED_FIELDS if mapping[f] not in df.columns]
    if missing:
        raise ValueError(f"Reception sheet is missing columns: {missing}")
    return rows_from_records(df.to_dict(orient="records"), columns)


def rows_from_records(
    records: Iterable[Mapping[str, Any]],
    columns: Optional[Mapping[str, str]] = None,
) -> List[TransactionRow]:
    """Convert header-keyed mappings (one per sheet line) into rows."""
    mapping = resolve_columns(columns)
    return [_row_from_record(i, rec, mapping) for i, rec in enumerate(records)]


def _row_from_record(
    idx: int, record: Mapping[str, Any], mapping: Mapping[str, str]
) -> TransactionRow:
    def cell(field: str) -> Any:
        value = record.get(mapping[field])
        return None if _is_blank(value) else value

    try:
        direction = TransactionType.from_value(cell("transaction_type"))
    except ValueError as e:
        raise ValueError(f"Row {idx}: {e}") from e

    return TransactionRow(
        idx=idx,
        position_number=_position(cell("position_number")),
        work_group=_text(cell("work_group")),
        item_name=_text(cell("item_name")),
        transaction_type=direction,
        quantity=_amount(idx, "quantity", cell("quantity")),
        price=_amount(idx, "price", cell("price")),
        service_name=_text(cell("service_name")),
        subdivision_name=_text(cell("subdivision_name")),
        reception_number=_text(cell("reception_number")),
        reception_date=to_display_date(cell("reception_date")),
        counterparty_name=_text(cell("counterparty_name")),
    )


def _is_blank(value: Any) -> bool:
    if value is None or isinstance(value, str):
        return is_null_or_whitespace(value)
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _text(value: Any) -> str:
    # 101.0 read from a numeric column should come back as "101"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return to_str(value)


def _position(value: Any) -> Any:
    """Integral positions become ``int``; anything else is kept as read."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        return int(Decimal(text)) if _INTEGRAL_TEXT.fullmatch(text) else text
    try:
        return to_int(value)
    except ValueError:
        return value


def _amount(idx: int, name: str, value: Any) -> Any:
    """Parse a numeric cell; unreadable cells are kept literally."""
    if value is None:
        return None
    try:
        return to_finite_decimal(value)
    except ValueError:
        log.debug("Row %d: %s %r is not a number", idx, name, value)
        return value

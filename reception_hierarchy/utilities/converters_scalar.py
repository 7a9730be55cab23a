# reception_hierarchy/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Final, Optional


def _bad(value: Any, target: str) -> ValueError:
    return ValueError(f"Cannot convert {type(value).__name__} to {target}")


def to_decimal(value: Any) -> Decimal:
    """
    Convert various inputs to Decimal with lenient, locale-aware-ish parsing.

    Supported string formats:
      - "1234", "-1234", "1234-", "(1,234.56)", "-3,188.32"
      - "1,234.56" (US) and "1 234,56" / "1.234,56" (RU/EU)
      - Currency symbols/words ignored: "1 500 ₽", "RUB 1.234,56", etc.

    Rules for decimal/thousands detection:
      * If both ',' and '.' appear: the *last* separator is treated as decimal;
        the other is treated as thousands and removed.
      * If only one of ',' or '.' appears:
          - If exactly 3 digits follow it, treat it as thousands (remove it).
          - If 1–2 digits follow it, treat it as decimal.
          - Otherwise, treat as thousands (remove).

    Raises:
        ValueError: if no digits are present, the cleaned value is invalid,
        or the input is not a number or string.

    Examples:
        to_decimal("-3,188.32")      -> Decimal('-3188.32')
        to_decimal("1 234,56 ₽")     -> Decimal('1234.56')
        to_decimal("(1,234.56)")     -> Decimal('-1234.56')
        to_decimal(12.5)             -> Decimal('12.5')
    """
    if isinstance(value, bool):
        raise _bad(value, "Decimal")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # Avoid binary float artifacts
        return Decimal(str(value))

    if not isinstance(value, str):
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    cleaned = clean_number_like_string(value)

    try:
        return Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
        ) from e


def to_finite_decimal(value: Any) -> Decimal:
    """Like :func:`to_decimal` but also rejects NaN and infinities."""
    result = to_decimal(value)
    if not result.is_finite():
        raise ValueError(f"Non-finite amount: {value!r}")
    return result


def clean_number_like_string(value: str, decimal_char: str = "") -> str:
    s = value.strip()
    if not s:
        raise ValueError("Empty string cannot be converted to Decimal")

    # NBSP, narrow NBSP, unicode minus
    s = s.replace("\xa0", " ").replace("\u202f", " ").replace(_UNICODE_MINUS, "-")
    s = s.strip()

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()
    if s.endswith("-"):
        neg = not neg
        s = s[:-1].strip()

    # Drop currency marks, letters and spaces used as thousands separators
    s = _NON_DIGIT_KEEP_SEP.sub("", s)

    if s.startswith("+"):
        s = s[1:]
    if s.startswith("-"):
        neg = not neg
        s = s[1:]

    digits = re.sub(r"[^\d]", "", s)
    if not digits:
        raise ValueError(f"No digits found in input: {value!r}")

    has_comma = "," in s
    has_dot = "." in s

    def _apply_decimal_sep(txt: str, decimal_sep: Optional[str]) -> str:
        if decimal_sep is None:
            return txt.replace(",", "").replace(".", "")
        if decimal_sep == ".":
            return txt.replace(",", "")
        return txt.replace(".", "").replace(",", ".")

    if decimal_char != "":
        if decimal_char not in (".", ","):
            raise ValueError(f"Invalid decimal_char: {decimal_char!r}")
        cleaned = _apply_decimal_sep(s, decimal_char)
    elif has_comma and has_dot:
        dec_sep = "," if s.rfind(",") > s.rfind(".") else "."
        cleaned = _apply_decimal_sep(s, dec_sep)
    elif has_comma or has_dot:
        ch = "," if has_comma else "."
        after = len(s) - s.rfind(ch) - 1
        dec_sep = ch if after in (1, 2) else None
        cleaned = _apply_decimal_sep(s, dec_sep)
    else:
        cleaned = s

    cleaned = cleaned.strip()
    if neg and cleaned and cleaned[0] != "-":
        cleaned = "-" + cleaned
    return cleaned


def to_int(v: Any) -> int:
    if isinstance(v, bool):
        raise _bad(v, "int")
    if isinstance(v, int):
        return v
    if isinstance(v, Decimal):
        if v != v.to_integral_value():
            raise ValueError(f"Non-integer Decimal {v} for int field")
        return int(v)
    if isinstance(v, float):
        if not v.is_integer():
            raise ValueError(f"Non-integer float {v} for int field")
        return int(v)
    if not isinstance(v, str):
        raise ValueError(f"Unsupported type for integer conversion: {type(v).__name__}")
    cleaned = clean_number_like_string(v, ".")
    try:
        return int(cleaned)
    except ValueError as e:
        raise ValueError(
            f"Could not parse int from {v!r} (normalized to {cleaned!r})"
        ) from e


def to_str(v: Any) -> str:
    return "" if v is None else str(v)


def to_display_date(v: Any) -> str:
    """Render spreadsheet date cells as ``dd.mm.yyyy``; other values as text."""
    if isinstance(v, datetime):
        v = v.date()
    if isinstance(v, date):
        return v.strftime(_DISPLAY_DATE_FORMAT)
    return to_str(v).strip()


_DISPLAY_DATE_FORMAT: Final[str] = "%d.%m.%Y"
_NON_DIGIT_KEEP_SEP: Final[re.Pattern[str]] = re.compile(r"[^\d,.\-\(\)]+")
_UNICODE_MINUS = "\u2212"  # '−'

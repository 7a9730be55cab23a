from .config_logging import LOGGING, configure_logging
from .converters_scalar import (
    to_decimal,
    to_display_date,
    to_finite_decimal,
    to_int,
    to_str,
)
from .core_util import is_null_or_whitespace, open_for_write

__all__ = [
    "is_null_or_whitespace",
    "open_for_write",
    "to_decimal",
    "to_finite_decimal",
    "to_int",
    "to_str",
    "to_display_date",
    "LOGGING",
    "configure_logging",
]

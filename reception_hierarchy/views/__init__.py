from .expansion_state import ExpansionState, iter_paths
from .outline import NO_DATA_MESSAGE, format_amount, render_outline

__all__ = [
    "ExpansionState",
    "iter_paths",
    "NO_DATA_MESSAGE",
    "format_amount",
    "render_outline",
]

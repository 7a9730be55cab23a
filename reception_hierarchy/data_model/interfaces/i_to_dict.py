# reception_hierarchy/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from typing import List, Union, runtime_checkable

from typing_extensions import Protocol, TypeAlias

RecursiveDict: TypeAlias = Union[
    str, int, None, List["RecursiveDict"], dict[str, "RecursiveDict"]
]


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> dict[str, RecursiveDict]: ...

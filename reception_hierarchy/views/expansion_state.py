# reception_hierarchy/views/expansion_state.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

from reception_hierarchy.data_model import GroupNode, ReceptionHierarchy

NodePath = Tuple[Any, ...]


def iter_paths(
    hierarchy: Optional[ReceptionHierarchy],
) -> Iterator[Tuple[NodePath, GroupNode]]:
    """Yield ``(path, node)`` for every node; a path is the chain of keys."""
    if hierarchy is None:
        return

    def _walk(node: GroupNode, parent: NodePath) -> Iterator[Tuple[NodePath, GroupNode]]:
        path = parent + (node.key,)
        yield path, node
        for child in node.children:
            yield from _walk(child, path)

    for position in hierarchy.positions:
        yield from _walk(position, ())


@dataclass
class ExpansionState:
    """
    Expanded/collapsed flags for the panels of a rendered reception tree.

    Flags live outside the tree and are keyed by node path, so rebuilding the
    tree from fresh rows keeps whatever the user opened or closed. Nodes
    without a flag use ``default_expanded``.
    """

    default_expanded: bool = True
    _flags: Dict[NodePath, bool] = field(default_factory=dict)

    def is_expanded(self, path: NodePath) -> bool:
        return self._flags.get(tuple(path), self.default_expanded)

    def set_expanded(self, path: NodePath, expanded: bool) -> None:
        self._flags[tuple(path)] = expanded

    def toggle(self, path: NodePath) -> bool:
        """Flip one node and return its new state."""
        expanded = not self.is_expanded(path)
        self.set_expanded(path, expanded)
        return expanded

    def expand_all(self) -> None:
        self._flags.clear()
        self.default_expanded = True

    def collapse_all(self) -> None:
        self._flags.clear()
        self.default_expanded = False

    def collapse_level(self, hierarchy: Optional[ReceptionHierarchy], depth: int) -> None:
        """Collapse every node at ``depth`` (1 = positions, 4 = directions)."""
        for path, _node in iter_paths(hierarchy):
            if len(path) == depth:
                self.set_expanded(path, False)

"""Label-to-index registry for graph nodes.

Nodes are addressed externally by string labels and internally by dense
integer indices assigned in first-seen order, starting from 0.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Tuple

from mcflow.exceptions import UnknownIndexError, UnreachableNodeError


class NodeRegistry:
    """Bidirectional mapping between node labels and integer indices.

    The mapping only grows; indices are never reused or reassigned.

    Example:
        >>> reg = NodeRegistry()
        >>> reg.intern("A"), reg.intern("B"), reg.intern("A")
        (0, 1, 0)
        >>> reg.label_of(1)
        'B'
    """

    def __init__(self) -> None:
        self._to_index: Dict[str, int] = {}
        self._to_label: List[str] = []

    def intern(self, label: str) -> int:
        """Return the index of ``label``, allocating the next one if unseen."""
        index = self._to_index.get(label)
        if index is None:
            index = len(self._to_label)
            self._to_index[label] = index
            self._to_label.append(label)
        return index

    def index_of(self, label: str) -> int:
        """Return the index of a known label.

        Raises:
            UnreachableNodeError: If ``label`` was never interned.
        """
        try:
            return self._to_index[label]
        except KeyError:
            raise UnreachableNodeError(label) from None

    def label_of(self, index: int) -> str:
        """Return the label for an allocated index.

        Raises:
            UnknownIndexError: If ``index`` was never allocated.
        """
        if not 0 <= index < len(self._to_label):
            raise UnknownIndexError(index)
        return self._to_label[index]

    def labels(self) -> Tuple[str, ...]:
        """Return all labels in index order."""
        return tuple(self._to_label)

    def __contains__(self, label: object) -> bool:
        return label in self._to_index

    def __len__(self) -> int:
        return len(self._to_label)

    def __iter__(self) -> Iterator[str]:
        return iter(self._to_label)

    def __repr__(self) -> str:
        return f"NodeRegistry(nodes={len(self)})"

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree node classes."""

from __future__ import annotations

from enum import Enum
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Tree


class Kind(Enum):
    """What a tree entry is: a leaf Node or a Branch holding a sub-tree."""

    NODE = 'node'
    BRANCH = 'branch'


class TreeNode:
    """An entry in a Tree.

    Each node has:
    - label: The node's unique key within its parent
    - value: Either a leaf payload or a Tree (for branches)
    - parent: Reference to the containing Tree

    Example:
        >>> node = TreeNode('main.rs', b'fn main() {}')
        >>> node.label
        'main.rs'
        >>> node.is_leaf
        True
    """

    __slots__ = ('label', 'value', 'parent')

    def __init__(
        self,
        label: Any,
        value: Any = None,
        parent: Tree | None = None,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            label: The node's unique key.
            value: The leaf payload, or a Tree for a branch.
            parent: The Tree containing this node.
        """
        self.label = label
        self.value = value
        self.parent = parent

    def __repr__(self) -> str:
        from .core import Tree
        value_repr = (
            f"Tree({len(self.value)})"
            if isinstance(self.value, Tree)
            else repr(self.value)
        )
        return f"TreeNode({self.label!r}, value={value_repr})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.label == other.label and self.value == other.value

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_branch(self) -> bool:
        """True if this node contains a Tree (has children)."""
        from .core import Tree
        return isinstance(self.value, Tree)

    @property
    def is_leaf(self) -> bool:
        """True if this node contains a leaf payload."""
        return not self.is_branch

    @property
    def kind(self) -> Kind:
        """Kind.BRANCH or Kind.NODE."""
        return Kind.BRANCH if self.is_branch else Kind.NODE

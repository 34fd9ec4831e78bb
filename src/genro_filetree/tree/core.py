# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree - a generic, label-indexed hierarchy of branches and leaves.

This module provides the Tree class, the engine under the file system model.
A Tree is a level of entries keyed by label; each entry is either a leaf
Node carrying a payload or a Branch carrying a nested Tree.

Key Features:
    - **O(1) lookup**: Internal dict keyed by label at every level
    - **Path-guided insert**: Missing intermediate branches are created
    - **Path-guided lookup**: Find a leaf or a branch, ``None`` when absent
    - **Merge**: Combine another tree into this one, branch by branch
    - **Walk**: Flattened iteration over every entry or every leaf

Paths are plain sequences of labels here; the string form and the root
marker belong to ``genro_filetree.label``.

Example:
    >>> tree = Tree()
    >>> tree.insert(['src', 'main.rs'], b'fn main() {}')
    >>> tree.find_node(['src', 'main.rs'])
    b'fn main() {}'
    >>> tree.list_children()
    [('src', <Kind.BRANCH: 'branch'>)]
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Any, Callable, Generic, Iterator, Sequence, TypeVar

from ..exceptions import DuplicateLabelError, StructuralViolationError
from .node import Kind, TreeNode

logger = logging.getLogger(__name__)

K = TypeVar('K')
V = TypeVar('V')
A = TypeVar('A')


class Tree(Generic[K, V]):
    """A hierarchical container of leaves and branches.

    Tree provides:
    - insert(labels, value): Create/overwrite a leaf, creating branches
    - find_node(labels) / find_branch(labels): Lookups returning None if absent
    - list_children() / iter_children(): The immediate level
    - walk() / iter_leaves() / fold_leaves(): Every entry below this level
    - combine(label, other) / update(other): Structural merge

    A Tree with no entries is only expected as a fresh root; branches are
    created on the way to a leaf, so they always hold at least one entry.

    Attributes:
        parent: The TreeNode that contains this tree as its value,
            or None if this is a root tree.
    """

    __slots__ = ('_nodes', 'parent', '_raise_on_conflict')

    def __init__(
        self,
        parent: TreeNode | None = None,
        raise_on_conflict: bool = True,
    ) -> None:
        """Initialize a Tree.

        Args:
            parent: The TreeNode that contains this tree as its value.
            raise_on_conflict: If True (default), writing a leaf where a
                branch is (or the reverse) raises StructuralViolationError, and
                merging a different leaf under an existing label raises
                DuplicateLabelError. If False, the later write replaces the
                earlier entry and a warning is logged.
                Branches created below inherit the setting.
        """
        self._nodes: dict[K, TreeNode] = {}
        self.parent = parent
        self._raise_on_conflict = raise_on_conflict

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing child labels."""
        return f"Tree({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[TreeNode]:
        """Iterate over direct child nodes."""
        return iter(self._nodes.values())

    def __contains__(self, label: Any) -> bool:
        """Check if label names a direct child."""
        return label in self._nodes

    def __eq__(self, other: Any) -> bool:
        """Two trees are equal when they hold the same labels with equal values.

        Child order does not take part in the comparison.
        """
        if not isinstance(other, Tree):
            return NotImplemented
        if self._nodes.keys() != other._nodes.keys():
            return False
        return all(
            node.value == other._nodes[label].value
            for label, node in self._nodes.items()
        )

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_empty(self) -> bool:
        """True if this level has no entries."""
        return not self._nodes

    @property
    def raise_on_conflict(self) -> bool:
        """Whether structural conflicts raise instead of replacing."""
        return self._raise_on_conflict

    # ==================== Node Storage ====================

    def _add_branch(self, label: K, child: Tree | None = None) -> TreeNode:
        """Store child (a new empty tree if None) as the branch under label.

        Any entry already under label is replaced.
        """
        if child is None:
            child = Tree(raise_on_conflict=self._raise_on_conflict)
        node = TreeNode(label, child, parent=self)
        child.parent = node
        self._nodes[label] = node
        return node

    def _add_leaf(self, label: K, value: V) -> TreeNode:
        """Store value under label, replacing any entry there."""
        node = TreeNode(label, value, parent=self)
        self._nodes[label] = node
        return node

    def _conflict(
        self,
        message: str,
        error: type[StructuralViolationError] = StructuralViolationError,
    ) -> None:
        """Raise error, or log that the conflicting entry is being replaced."""
        if self._raise_on_conflict:
            raise error(message)
        logger.warning(f"{message}; replacing existing entry")

    # ==================== Path Traversal ====================

    def _htraverse(
        self, labels: Sequence[K], autocreate: bool = False
    ) -> tuple[Tree, K]:
        """Walk every label but the last, optionally creating branches.

        Args:
            labels: Non-empty sequence of labels.
            autocreate: If True, create missing intermediate branches.

        Returns:
            Tuple of (parent_tree, final_label)

        Raises:
            KeyError: If a segment is missing, or is a leaf, and autocreate
                is False.
            StructuralViolationError: If autocreate is True, a segment is a
                leaf, and conflicts raise.
        """
        if not labels:
            raise KeyError("Empty path")

        current = self
        for i, label in enumerate(labels[:-1]):
            node = current._nodes.get(label)
            if node is None:
                if not autocreate:
                    raise KeyError(f"Path segment {label!r} not found")
                node = current._add_branch(label)
            elif not node.is_branch:
                if not autocreate:
                    remaining = list(labels[i + 1:])
                    raise KeyError(f"{label!r} is a leaf, cannot access {remaining!r}")
                current._conflict(f"Cannot create a branch over leaf {label!r}")
                node = current._add_branch(label)
            current = node.value

        return current, labels[-1]

    # ==================== Core API ====================

    def insert(self, labels: Sequence[K], value: V) -> None:
        """Insert value as a leaf at labels, creating branches as needed.

        An existing leaf at the same place is overwritten.

        Args:
            labels: Non-empty sequence of labels; the last one names the leaf.
            value: The leaf payload.

        Raises:
            StructuralViolationError: If a branch is in the way and conflicts
                raise.

        Example:
            >>> tree.insert(['a', 'b', 'c.txt'], b'...')
        """
        parent_tree, label = self._htraverse(labels, autocreate=True)
        existing = parent_tree._nodes.get(label)
        if existing is not None and existing.is_branch:
            parent_tree._conflict(f"Cannot insert a leaf over branch {label!r}")
        parent_tree._add_leaf(label, value)

    def get_node(self, labels: Sequence[K]) -> TreeNode:
        """Get the node at labels.

        Raises:
            KeyError: If the path does not resolve.
        """
        parent_tree, label = self._htraverse(labels, autocreate=False)
        return parent_tree._nodes[label]

    def find_node(self, labels: Sequence[K]) -> V | None:
        """Return the leaf payload at labels, or None.

        None is returned when a segment is missing, when a segment before
        the last is a leaf, or when the last segment is a branch.
        """
        try:
            node = self.get_node(labels)
        except KeyError:
            return None
        if node.is_branch:
            return None
        return node.value

    def find_branch(self, labels: Sequence[K]) -> Tree | None:
        """Return a copy of the branch at labels, or None.

        The copy is detached, so changing it leaves this tree as it is.
        """
        try:
            node = self.get_node(labels)
        except KeyError:
            return None
        if not node.is_branch:
            return None
        return node.value.copy()

    def get(self, label: K, default: Any = None) -> TreeNode | None:
        """Get a direct child node by label, with default."""
        return self._nodes.get(label, default)

    # ==================== Iteration ====================

    def list_children(self) -> list[tuple[K, Kind]]:
        """Return (label, Kind) for every direct child.

        The order is not guaranteed; sort when a stable order is needed.
        """
        return [(node.label, node.kind) for node in self._nodes.values()]

    def iter_children(self) -> Iterator[TreeNode]:
        """Yield detached copies of the direct children.

        Branch values are deep copies, so changing them leaves this tree as
        it is. The iterator can be requested again for a fresh pass.
        """
        for node in self._nodes.values():
            value = node.value.copy() if node.is_branch else node.value
            yield TreeNode(node.label, value)

    def walk(self) -> Iterator[tuple[tuple[K, ...], TreeNode]]:
        """Yield (labels, node) for every entry below this level.

        Example:
            >>> for labels, node in tree.walk():
            ...     print('/'.join(labels), node.kind)
        """
        def _walk_gen(tree: Tree, prefix: tuple[K, ...]) -> Iterator[tuple[tuple[K, ...], TreeNode]]:
            for node in tree._nodes.values():
                labels = prefix + (node.label,)
                yield labels, node
                if node.is_branch:
                    yield from _walk_gen(node.value, labels)

        return _walk_gen(self, ())

    def iter_leaves(self) -> Iterator[tuple[tuple[K, ...], V]]:
        """Yield (labels, payload) for every leaf below this level."""
        for labels, node in self.walk():
            if node.is_leaf:
                yield labels, node.value

    def fold_leaves(self, func: Callable[[A, V], A], initial: A) -> A:
        """Fold func over every leaf payload, starting from initial.

        The visiting order is unspecified, so func should not depend on it.

        Example:
            >>> tree.fold_leaves(lambda total, data: total + len(data), 0)
        """
        return reduce(func, (value for _, value in self.iter_leaves()), initial)

    # ==================== Merge ====================

    def combine(self, label: K, other: Tree) -> None:
        """Merge other into this tree as the branch named label.

        If a branch named label already exists, other's entries are merged
        into it recursively; otherwise a copy of other is added as a new
        branch. A branch with no leaves anywhere below it is ignored, so no
        empty branch is created.

        The merge is all-or-nothing: it is staged on a copy of the existing
        branch, so a conflict that raises leaves this tree unchanged.

        Raises:
            StructuralViolationError: If label names a leaf and conflicts raise.
            DuplicateLabelError: If a leaf of other clashes with a different
                leaf of the same label and conflicts raise.
        """
        existing = self._nodes.get(label)
        if existing is not None and existing.is_branch:
            logger.debug(f"Merging into existing branch {label!r}")
            staged = existing.value.copy()
            staged._merge(other)
            self._add_branch(label, staged)
            return
        self._merge_branch(label, other)

    def attach(self, label: K, tree: Tree) -> None:
        """Add tree as the branch named label, without copying it.

        Raises:
            StructuralViolationError: If label is taken and conflicts raise.
        """
        if label in self._nodes:
            self._conflict(f"Cannot attach branch {label!r} over an existing entry")
        self._add_branch(label, tree)

    def update(self, other: Tree) -> None:
        """Merge every entry of other into this level.

        For each entry in other:
        - Branch: combined with the branch of the same label (see combine)
        - Leaf, label absent: copied in
        - Leaf, same label and equal payload: nothing to do
        - Leaf, same label otherwise: a conflict

        Like combine, the merge is staged on a copy and only takes effect
        when it completes.

        Example:
            >>> tree = Tree()
            >>> tree.insert(['config', 'a'], 1)
            >>> other = Tree()
            >>> other.insert(['config', 'b'], 2)
            >>> tree.update(other)
            >>> tree.as_dict()
            {'config': {'a': 1, 'b': 2}}
        """
        staged = self.copy()
        staged._merge(other)
        self._nodes = staged._nodes
        for node in self._nodes.values():
            node.parent = self

    def _merge_branch(self, label: K, other: Tree) -> None:
        """In-place combine; callers own self and discard it on error."""
        existing = self._nodes.get(label)
        if existing is not None and existing.is_branch:
            existing.value._merge(other)
            return

        child: Tree = Tree(raise_on_conflict=self._raise_on_conflict)
        child._merge(other)
        if child.is_empty:
            logger.debug(f"Skipping combine of empty branch {label!r}")
            return

        if existing is not None:
            self._conflict(f"Cannot merge branch {label!r} into a leaf")
        logger.debug(f"Adding branch {label!r}")
        self._add_branch(label, child)

    def _merge(self, other: Tree) -> None:
        """In-place update; see update for the rules."""
        for other_node in list(other._nodes.values()):
            label = other_node.label
            if other_node.is_branch:
                self._merge_branch(label, other_node.value)
                continue

            existing = self._nodes.get(label)
            if existing is None:
                self._add_leaf(label, other_node.value)
            elif existing.is_branch:
                self._conflict(f"Cannot merge leaf {label!r} into a branch")
                self._add_leaf(label, other_node.value)
            elif existing.value != other_node.value:
                self._conflict(
                    f"Leaf {label!r} already exists with different contents",
                    DuplicateLabelError,
                )
                self._add_leaf(label, other_node.value)

    # ==================== Conversion ====================

    def copy(self) -> Tree:
        """Return a deep copy of the branch structure.

        Leaf payloads are shared; they are expected to be immutable.
        """
        result: Tree = Tree(raise_on_conflict=self._raise_on_conflict)
        for node in self._nodes.values():
            if node.is_branch:
                result._add_branch(node.label, node.value.copy())
            else:
                result._add_leaf(node.label, node.value)
        return result

    def as_dict(self) -> dict[Any, Any]:
        """Convert to plain nested dicts (recursive).

        Branches become dicts, leaves become their payload.
        """
        return {
            node.label: node.value.as_dict() if node.is_branch else node.value
            for node in self._nodes.values()
        }

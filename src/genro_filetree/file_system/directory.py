# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Directory - a snapshot of a repository file tree.

A Directory wraps a Tree whose leaves are File values and whose keys are
Labels. It is built once from a listing of ``directory path -> files`` and
then queried by Path.

Every sub-directory holds at least one entry, the way version control
systems only track directories that contain something. Branches are only
created on the way to a file, so a tree built through this module never
contains an empty sub-directory; ``validation_errors`` reports any that was
attached by hand.

Path Resolution:
    - ``foo/bar/baz.rs`` is resolved from the current directory
    - a ``~`` segment is an ordinary name, so ``~/foo`` is not ``foo``
    - the root path ``~`` on its own is the current directory in
      ``find_directory``, ``insert_files`` and ``from_map``

Example:
    >>> root = Directory.root()
    >>> root.insert_file(Path.from_string('src/main.rs'), File(b'fn main() {}'))
    >>> root.find_file(Path.from_string('src/main.rs'))
    File(contents=b'fn main() ', size=12)
    >>> root.list_directory()
    [(Label('src'), <SystemType.DIRECTORY: 1>)]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterator, Mapping, Sequence, Union

from ..label import Label, Path
from ..nonempty import NonEmpty
from ..tree import Kind, Tree
from .file import File

logger = logging.getLogger(__name__)


class SystemType(IntEnum):
    """What a directory listing entry is. Files sort before directories."""

    FILE = 0
    DIRECTORY = 1

    @classmethod
    def file(cls, label: Label) -> tuple[Label, SystemType]:
        """A listing entry for a file named label."""
        return label, cls.FILE

    @classmethod
    def directory(cls, label: Label) -> tuple[Label, SystemType]:
        """A listing entry for a directory named label."""
        return label, cls.DIRECTORY


_SYSTEM_TYPES = {Kind.NODE: SystemType.FILE, Kind.BRANCH: SystemType.DIRECTORY}


@dataclass(frozen=True)
class FileEntry:
    """A file yielded while iterating a Directory: its name and its File."""

    name: Label
    file: File

    @property
    def label(self) -> Label:
        """The file name."""
        return self.name


class Directory:
    """A named, non-empty tree of files and sub-directories.

    Directory provides:
    - from_map(mapping): Build a whole snapshot
    - find_file(path) / find_directory(path): Lookups returning None if absent
    - list_directory() / iter(): The immediate entries
    - size(): Total bytes of every reachable file
    - combine(other): Merge another directory in, sharing common prefixes

    Example:
        >>> root = Directory.from_map({
        ...     Path.root(): NonEmpty((Label('README.md'), File(b'# Demo'))),
        ...     Path.from_string('src'): NonEmpty((Label('lib.rs'), File(b''))),
        ... })
        >>> sorted(root.list_directory())
        [(Label('README.md'), <SystemType.FILE: 0>), (Label('src'), <SystemType.DIRECTORY: 1>)]
    """

    __slots__ = ('_label', '_tree')

    def __init__(self, label: Label | None = None, tree: Tree | None = None) -> None:
        """Initialize a Directory.

        Prefer the ``root``, ``new`` and ``from_map`` constructors.

        Args:
            label: The directory's name, or None for the root.
            tree: The tree of entries. A fresh empty tree if None.
        """
        self._label = label
        self._tree: Tree[Label, File] = tree if tree is not None else Tree()

    # ==================== Constructors ====================

    @classmethod
    def root(cls, raise_on_conflict: bool = True) -> Directory:
        """Create an empty root directory.

        Args:
            raise_on_conflict: If True (default), placing a file where a
                directory is (or the reverse), or merging a different file
                under an existing name, raises. If False the later write wins.
        """
        return cls(None, Tree(raise_on_conflict=raise_on_conflict))

    @classmethod
    def new(cls, label: Label, raise_on_conflict: bool = True) -> Directory:
        """Create an empty directory named label."""
        return cls(label, Tree(raise_on_conflict=raise_on_conflict))

    @classmethod
    def mkdir(cls, label: Label, child: Directory) -> Directory:
        """Create a directory named label holding child as its only entry.

        child's entries are taken over, not copied.
        """
        tree: Tree[Label, File] = Tree(raise_on_conflict=child.raise_on_conflict)
        tree.attach(child.current, child._tree)
        return cls(label, tree)

    @classmethod
    def from_map(
        cls,
        mapping: Mapping[Path, NonEmpty[tuple[Label, File]]],
        raise_on_conflict: bool = True,
    ) -> Directory:
        """Build a root directory from a ``directory path -> files`` listing.

        Files under the root path go directly into the root. For any other
        path, a chain of directories ending with the files is built and then
        combined into the root, so directories shared by several paths are
        merged rather than duplicated.

        Args:
            mapping: Directory paths to the files they directly contain.
            raise_on_conflict: See ``root``.

        Returns:
            The root Directory.
        """
        root = cls.root(raise_on_conflict=raise_on_conflict)
        logger.debug(f"Building directory from {len(mapping)} paths")

        for path, files in mapping.items():
            if path.is_root():
                root.insert_files([], files)
                continue

            *prefix, current = path.labels
            directory = cls.new(current, raise_on_conflict=raise_on_conflict)
            directory.insert_files([], files)
            for label in reversed(prefix):
                directory = cls.mkdir(label, directory)
            root.combine(directory)

        logger.debug(f"Built directory with {len(root._tree)} top-level entries")
        return root

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Directory({str(self.current)!r}, {[str(node.label) for node in self._tree]})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Directory):
            return NotImplemented
        return self.current == other.current and self._tree == other._tree

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[DirectoryContents]:
        return self.iter()

    def __len__(self) -> int:
        """Return the number of immediate entries."""
        return len(self._tree)

    # ==================== Properties ====================

    @property
    def current(self) -> Label:
        """The directory's own label; the root label for the root."""
        if self._label is None:
            return Label.root()
        return self._label

    @property
    def label(self) -> Label:
        """Alias of current, so files and directories share ``.label``."""
        return self.current

    @property
    def is_root(self) -> bool:
        """True for a directory created as the root."""
        return self._label is None

    @property
    def raise_on_conflict(self) -> bool:
        """Whether structural conflicts raise instead of replacing."""
        return self._tree.raise_on_conflict

    # ==================== Queries ====================

    def list_directory(self) -> list[tuple[Label, SystemType]]:
        """List the immediate files and sub-directories.

        The order is not guaranteed; sort the result to compare it.
        """
        return [(label, _SYSTEM_TYPES[kind]) for label, kind in self._tree.list_children()]

    def iter(self) -> Iterator[DirectoryContents]:
        """Yield a FileEntry or a Directory for every immediate entry.

        Sub-directories are fresh copies.
        """
        for node in self._tree.iter_children():
            if node.is_branch:
                yield Directory(node.label, node.value)
            else:
                yield FileEntry(node.label, node.value)

    def find_file(self, path: Path) -> File | None:
        """Find the File at path, or None if path does not lead to a file.

        Example:
            >>> root.find_file(Path.from_string('foo/bar/baz.rs'))
        """
        return self._tree.find_node(path.labels)

    def find_directory(self, path: Path) -> Directory | None:
        """Find the Directory at path, or None if path does not lead to one.

        The result is a copy named after the last label of path. The root
        path returns a copy of this directory.
        """
        if path.is_root():
            return self.copy()

        tree = self._tree.find_branch(path.labels)
        if tree is None:
            return None
        _, current = path.split_last()
        return Directory(current, tree)

    def size(self) -> int:
        """Total size in bytes of every file reachable from this directory."""
        return self._tree.fold_leaves(lambda total, file: total + file.size, 0)

    def iter_files(self) -> Iterator[tuple[Path, File]]:
        """Yield (path, file) for every reachable file, paths relative to here."""
        for labels, file in self._tree.iter_leaves():
            yield Path(labels), file

    def copy(self) -> Directory:
        """Return a deep copy of this directory."""
        return Directory(self._label, self._tree.copy())

    # ==================== Building ====================

    def insert_file(self, path: Path, file: File) -> None:
        """Insert file at path (file name included), creating directories.

        Raises:
            StructuralViolationError: If a directory is in the way, or an
                intermediate label names a file, and conflicts raise.
        """
        self._tree.insert(path.labels, file)

    def insert_files(
        self,
        directory_path: Sequence[Label] | Path,
        files: NonEmpty[tuple[Label, File]],
    ) -> None:
        """Insert files under a shared directory path.

        Args:
            directory_path: Labels of the directory to place the files in.
                Empty, or the root path, means this directory.
            files: (name, File) pairs.
        """
        if isinstance(directory_path, Path):
            prefix = () if directory_path.is_root() else directory_path.labels
        else:
            prefix = tuple(directory_path)

        for name, file in files:
            self._tree.insert(prefix + (name,), file)

    def combine(self, other: Directory) -> None:
        """Merge other into this directory.

        If a sub-directory named like other exists, other's entries are merged
        into it at every depth; otherwise a copy of other becomes a new
        sub-directory. A root other has its entries merged directly here.
        Merging an empty directory changes nothing.

        Raises:
            StructuralViolationError: If other's name belongs to a file here
                and conflicts raise.
            DuplicateLabelError: If a file of other differs from a file with
                the same name here and conflicts raise.
        """
        if other.is_root:
            self._tree.update(other._tree)
        else:
            self._tree.combine(other.current, other._tree)

    # ==================== Validation ====================

    @property
    def is_valid(self) -> bool:
        """True if no reachable sub-directory is empty."""
        return not self.validation_errors()

    def validation_errors(self) -> dict[str, list[str]]:
        """Return the problems found below this directory.

        Returns:
            Dictionary mapping directory paths to their error lists.
            Only includes directories with errors.
        """
        errors: dict[str, list[str]] = {}
        for labels, node in self._tree.walk():
            if node.is_branch and node.value.is_empty:
                errors[str(Path(labels))] = ["directory has no entries"]
        return errors


DirectoryContents = Union[FileEntry, Directory]

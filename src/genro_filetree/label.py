# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Label and Path - the addressing primitives of a file tree.

A Label names one path segment: a file or directory name, or the reserved
root marker ``'~'``. A Path is a non-empty sequence of Labels read from the
outermost directory to the innermost entry.

Path Syntax:
    - Segments are separated by ``'/'``: ``'src/file_system/mod.rs'``
    - Leading and trailing separators are ignored: ``'/src/'`` == ``'src'``
    - The empty string is the root path ``'~'``

Example:
    >>> path = Path.from_string('foo/bar/baz.rs')
    >>> path.split_last()
    ([Label('foo'), Label('bar')], Label('baz.rs'))
    >>> str(path.push(Label('x')))
    'foo/bar/baz.rs/x'
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from .exceptions import EmptyPathError, InvalidLabelError

SEPARATOR = '/'
ROOT_LABEL = '~'


class Label(str):
    """A single path segment.

    Labels are plain strings with two guarantees enforced on construction:
    they are not empty and they never contain the separator. Use
    ``Label.unchecked`` to skip the checks for input that is already trusted.

    Example:
        >>> Label('main.rs')
        Label('main.rs')
        >>> Label.root()
        Label('~')
    """

    __slots__ = ()

    def __new__(cls, value: str) -> Label:
        if not value:
            raise InvalidLabelError("Label cannot be empty")
        if SEPARATOR in value:
            raise InvalidLabelError(
                f"Label '{value}' cannot contain the separator '{SEPARATOR}'"
            )
        return str.__new__(cls, value)

    @classmethod
    def unchecked(cls, value: str) -> Label:
        """Build a Label without validating its contents."""
        return str.__new__(cls, value)

    @classmethod
    def root(cls) -> Label:
        """The label of the root directory, ``'~'``."""
        return str.__new__(cls, ROOT_LABEL)

    def __repr__(self) -> str:
        return f"Label({str.__repr__(self)})"

    @property
    def is_root(self) -> bool:
        """True if this is the root marker."""
        return self == ROOT_LABEL


class Path:
    """A non-empty, immutable sequence of Labels.

    ``append`` and ``push`` return new paths; a Path is never changed after
    construction, so it can be used as a dict key.

    Attributes:
        labels: Tuple of the path's labels, outermost first.
    """

    __slots__ = ('labels',)

    def __init__(self, labels: Iterable[Label]) -> None:
        """Initialize a Path.

        Args:
            labels: One or more labels, outermost first.

        Raises:
            EmptyPathError: If labels is empty.
        """
        labels = tuple(labels)
        if not labels:
            raise EmptyPathError("Path requires at least one label")
        self.labels: tuple[Label, ...] = labels

    # ==================== Constructors ====================

    @classmethod
    def root(cls) -> Path:
        """The singleton path holding only the root label."""
        return cls((Label.root(),))

    @classmethod
    def new(cls, label: Label) -> Path:
        """A single-label path."""
        return cls((label,))

    @classmethod
    def from_labels(cls, head: Label, tail: Iterable[Label] = ()) -> Path:
        """Build a path from a mandatory first label and any further labels.

        Example:
            >>> Path.from_labels(Label.root(), [Label('foo'), Label('bar')])
            Path('~/foo/bar')
        """
        return cls((head, *tail))

    @classmethod
    def from_string(cls, value: str) -> Path:
        """Split a raw string on the separator.

        Segments are not validated, so this is only for input that is already
        trusted (tests, paths read back from a repository listing).

        Example:
            >>> Path.from_string('foo/bar/baz/')
            Path('foo/bar/baz')
            >>> Path.from_string('')
            Path('~')
        """
        trimmed = value.strip(SEPARATOR)
        if not trimmed:
            return cls.root()
        return cls(Label.unchecked(part) for part in trimmed.split(SEPARATOR))

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"Path({str(self)!r})"

    def __str__(self) -> str:
        return SEPARATOR.join(self.labels)

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[Label]:
        return iter(self.labels)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.labels == other.labels

    def __hash__(self) -> int:
        return hash(self.labels)

    # ==================== Operations ====================

    def is_root(self) -> bool:
        """True if this is exactly the root path."""
        return len(self.labels) == 1 and self.labels[0].is_root

    def append(self, other: Path) -> Path:
        """Return a new path with other's labels after this path's labels."""
        return Path(self.labels + other.labels)

    def push(self, label: Label) -> Path:
        """Return a new path extended on the right by label."""
        return Path(self.labels + (label,))

    def split_first(self) -> tuple[Label, list[Label]]:
        """Return the first label and the labels after it."""
        return self.labels[0], list(self.labels[1:])

    def split_last(self) -> tuple[list[Label], Label]:
        """Return the labels before the last one, and the last label.

        The prefix is usually a directory path and the last label a file or
        directory name. A single-label path gives an empty prefix; a repeated
        label (``foo/bar/foo``) stays in the prefix.

        Example:
            >>> Path.from_string('foo/bar/foo').split_last()
            ([Label('foo'), Label('bar')], Label('foo'))
            >>> Path.from_string('foo').split_last()
            ([], Label('foo'))
        """
        return list(self.labels[:-1]), self.labels[-1]

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NonEmpty - an immutable sequence that always holds at least one item.

The first item is stored apart from the rest, so an empty NonEmpty cannot
be constructed at all.

Example:
    >>> files = NonEmpty('main.rs', ['lib.rs'])
    >>> files.head
    'main.rs'
    >>> len(files)
    2
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .exceptions import EmptyPathError

T = TypeVar('T')
U = TypeVar('U')


class NonEmpty(Generic[T]):
    """A head item followed by zero or more tail items.

    Attributes:
        head: The first item, always present.
        tail: Tuple of the remaining items.
    """

    __slots__ = ('head', 'tail')

    def __init__(self, head: T, tail: Iterable[T] = ()) -> None:
        self.head = head
        self.tail: tuple[T, ...] = tuple(tail)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> NonEmpty[T]:
        """Build a NonEmpty from any iterable.

        Raises:
            EmptyPathError: If items yields nothing.
        """
        iterator = iter(items)
        try:
            head = next(iterator)
        except StopIteration:
            raise EmptyPathError("NonEmpty requires at least one item") from None
        return cls(head, iterator)

    def __repr__(self) -> str:
        return f"NonEmpty({self.head!r}, {list(self.tail)!r})"

    def __len__(self) -> int:
        return 1 + len(self.tail)

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __getitem__(self, index: int) -> T:
        return tuple(self)[index]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, NonEmpty):
            return NotImplemented
        return self.head == other.head and self.tail == other.tail

    def __hash__(self) -> int:
        return hash((self.head, self.tail))

    @property
    def last(self) -> T:
        """The final item (the head when there is no tail)."""
        return self.tail[-1] if self.tail else self.head

    def map(self, func: Callable[[T], U]) -> NonEmpty[U]:
        """Return a new NonEmpty with func applied to every item."""
        return NonEmpty(func(self.head), (func(item) for item in self.tail))

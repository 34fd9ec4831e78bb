# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""File - the byte payload stored at the leaves of a Directory."""

from __future__ import annotations

import hashlib
from typing import Any

_PREVIEW_BYTES = 10


class File:
    """An immutable blob of file contents.

    Example:
        >>> file = File(b'pub mod diff;')
        >>> file.size
        13
    """

    __slots__ = ('_contents',)

    def __init__(self, contents: bytes | bytearray | memoryview = b'') -> None:
        self._contents = bytes(contents)

    def __repr__(self) -> str:
        """Show the first few bytes and the size."""
        return f"File(contents={self._contents[:_PREVIEW_BYTES]!r}, size={self.size})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, File):
            return NotImplemented
        return self._contents == other._contents

    def __hash__(self) -> int:
        return hash(self._contents)

    @property
    def contents(self) -> bytes:
        """The file contents."""
        return self._contents

    @property
    def size(self) -> int:
        """Number of bytes in the contents."""
        return len(self._contents)

    def checksum(self) -> int:
        """64-bit fingerprint of the contents.

        Meant for spotting changed files, not for integrity checks. The value
        is stable across processes and interpreter versions.
        """
        digest = hashlib.blake2b(self._contents, digest_size=8).digest()
        return int.from_bytes(digest, 'big')

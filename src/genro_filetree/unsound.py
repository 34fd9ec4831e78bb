# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Unchecked constructors for labels and paths.

These skip all validation. They exist for tests and for callers whose input
already comes from a trusted listing.

Example:
    >>> from genro_filetree import unsound
    >>> unsound.path('foo/bar/baz.rs')
    Path('foo/bar/baz.rs')
"""

from __future__ import annotations

from .label import Label, Path


def label(value: str) -> Label:
    """Build a Label from value as is."""
    return Label.unchecked(value)


def path(value: str) -> Path:
    """Build a Path by splitting value on '/'."""
    return Path.from_string(value)

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""FileTree exceptions."""

from __future__ import annotations


class FileTreeError(Exception):
    """Base exception for FileTree errors."""

    pass


class InvalidLabelError(FileTreeError, ValueError):
    """Raised when a label is empty or contains the path separator."""

    pass


class EmptyPathError(FileTreeError, ValueError):
    """Raised when a Path or NonEmpty is built from zero elements."""

    pass


class StructuralViolationError(FileTreeError):
    """Raised when a write would put a file where a directory is, or vice versa."""

    pass


class DuplicateLabelError(StructuralViolationError):
    """Raised when a merge brings a different file under an existing file name."""

    pass

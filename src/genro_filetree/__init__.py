# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-FileTree - In-memory snapshots of repository file trees.

A lightweight, zero-dependency library for browsing a version-controlled
file tree at one revision: build it from a ``directory -> files`` listing,
look up files and directories by path, list and size them, and merge trees
that share directory prefixes.
"""

__version__ = "0.1.0"

from . import unsound
from .exceptions import (
    DuplicateLabelError,
    EmptyPathError,
    FileTreeError,
    InvalidLabelError,
    StructuralViolationError,
)
from .file_system import Directory, DirectoryContents, File, FileEntry, SystemType
from .label import Label, Path
from .nonempty import NonEmpty
from .tree import Kind, Tree, TreeNode

__all__ = [
    # Addressing
    "Label",
    "Path",
    "NonEmpty",
    "unsound",
    # Tree engine
    "Tree",
    "TreeNode",
    "Kind",
    # File system
    "Directory",
    "DirectoryContents",
    "File",
    "FileEntry",
    "SystemType",
    # Exceptions
    "FileTreeError",
    "InvalidLabelError",
    "EmptyPathError",
    "StructuralViolationError",
    "DuplicateLabelError",
]

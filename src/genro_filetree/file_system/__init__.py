# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""File system package - directories and files over the generic Tree.

The package is organized into:
- file: File, the byte payload with size and checksum
- directory: Directory, its listing types, construction and merge

Example:
    >>> from genro_filetree.file_system import Directory, File
    >>> root = Directory.root()
"""

from .directory import Directory, DirectoryContents, FileEntry, SystemType
from .file import File

__all__ = ["Directory", "DirectoryContents", "FileEntry", "File", "SystemType"]

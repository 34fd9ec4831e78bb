# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree package - the generic branch/leaf engine.

The package is organized into:
- core: Tree class with path-guided insert, lookup, iteration and merge
- node: TreeNode entries and their Kind

Example:
    >>> from genro_filetree.tree import Tree
    >>> tree = Tree()
    >>> tree.insert(['a', 'b'], 1)
    >>> tree.find_node(['a', 'b'])
    1
"""

from .core import Tree
from .node import Kind, TreeNode

__all__ = ["Tree", "TreeNode", "Kind"]

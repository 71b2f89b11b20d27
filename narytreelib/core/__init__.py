"""Core abstractions for NaryTreeLib.

This package contains the tree node itself, the traversal strategies that
walk it and the renderers that print it.
"""

from .node import NaryTreeNode, ChildrenView
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    LevelOrderTraverser,
    create_traverser,
    parse_strategy,
)
from .planning import TraversalPlan

__all__ = [
    "NaryTreeNode",
    "ChildrenView",
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "parse_strategy",
    "TraversalPlan",
]

"""NaryTreeLib - Generic N-ary tree nodes.

NaryTreeLib provides a tree node that owns any number of ordered children
and carries a value of any type, together with the usual queries (size,
height, leaves, search), traversal orders and text renderers.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from narytreelib import NaryTreeNode

    root = NaryTreeNode("root")
    child = root.add_child("child")
    print(root.to_pretty_text())
━━━━━━━━━━━━━━━━━━━━━━━━━━

Any node is a tree: call the queries and renderers on whichever node you
want to treat as the root.
"""

import logging

__version__ = "0.1.0"

from .core import (
    NaryTreeNode,
    ChildrenView,
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    LevelOrderTraverser,
    TraversalPlan,
    create_traverser,
)
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DepthConfig,
    FilterConfig,
    TextConfig,
    PrettyTextConfig,
    JsonConfig,
)
from .errors import (
    NaryTreeError,
    ChildIndexError,
    ImmutableViewError,
    AbsentValueError,
    TreeEncodingError,
    TreeDecodingError,
    InvalidConfigurationError,
)
from .api import (
    traverse_tree,
    collect_values,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
    build_tree,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "NaryTreeNode",
    "ChildrenView",
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "LevelOrderTraverser",
    "TraversalPlan",
    "create_traverser",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DepthConfig",
    "FilterConfig",
    "TextConfig",
    "PrettyTextConfig",
    "JsonConfig",
    # Errors
    "NaryTreeError",
    "ChildIndexError",
    "ImmutableViewError",
    "AbsentValueError",
    "TreeEncodingError",
    "TreeDecodingError",
    "InvalidConfigurationError",
    # API
    "traverse_tree",
    "collect_values",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_paths",
    "get_tree_stats",
    "build_tree",
]

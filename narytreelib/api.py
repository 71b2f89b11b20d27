"""High-level API for NaryTreeLib.

This module provides simple, functional interfaces for common operations on
a tree of NaryTreeNode instances. These functions wrap the traversal
planning machinery for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from .config import DepthConfig, FilterConfig, TraversalConfig, TraversalStrategy
from .core.node import NaryTreeNode
from .core.planning import TraversalPlan
from .core.traverser import LevelOrderTraverser, parse_strategy


def traverse_tree(
    root: NaryTreeNode,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[NaryTreeNode], bool]] = None,
    exclude_filter: Optional[Callable[[NaryTreeNode], bool]] = None,
) -> Iterator[NaryTreeNode]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (prefix, postfix, by_width, level)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded

    Returns:
        Iterator over the nodes that match the criteria

    Raises:
        ValueError: If strategy is unknown
        InvalidConfigurationError: If the depth window is invalid

    Example:
        >>> root = build_tree(("a", ["b", ("c", ["d"])]))
        >>> [node.value for node in traverse_tree(root, "by_width")]
        ['a', 'b', 'c', 'd']
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
        ),
    )
    # Built eagerly so configuration errors surface at call time
    plan = TraversalPlan(config)
    return (node for node, _ in plan.execute(root))


def collect_values(root: NaryTreeNode, **kwargs) -> List[Any]:
    """Collect the values of the traversed nodes into a list.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)
    """
    return [node.value for node in traverse_tree(root, **kwargs)]


def count_nodes(root: NaryTreeNode, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Without options this equals ``root.get_size()``.
    """
    count = 0
    for _ in traverse_tree(root, **kwargs):
        count += 1
    return count


def find_nodes(
    root: NaryTreeNode,
    predicate: Callable[[NaryTreeNode], bool],
    **kwargs
) -> Iterator[NaryTreeNode]:
    """Find nodes that match a predicate.

    Example:
        >>> root = build_tree((1, [2, 3, (4, [5])]))
        >>> [node.value for node in find_nodes(root, lambda n: n.value % 2 == 0)]
        [2, 4]
    """
    kwargs['include_filter'] = predicate
    return traverse_tree(root, **kwargs)


def get_leaf_nodes(root: NaryTreeNode, **kwargs) -> Iterator[NaryTreeNode]:
    """Get all leaf nodes in a tree."""
    for node in traverse_tree(root, **kwargs):
        if node.is_leaf():
            yield node


def get_tree_paths(root: NaryTreeNode) -> Iterator[List[Any]]:
    """Get the value path from root to each node, in pre-order.

    Example:
        >>> root = build_tree(("a", [("b", ["c"])]))
        >>> list(get_tree_paths(root))
        [['a'], ['a', 'b'], ['a', 'b', 'c']]
    """
    def _walk(node: NaryTreeNode, prefix: List[Any]) -> Iterator[List[Any]]:
        path = prefix + [node.value]
        yield path
        for child in node.children:
            yield from _walk(child, path)

    yield from _walk(root, [])


def get_tree_stats(root: NaryTreeNode) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        max_depth, depths (node count per depth) and average_branching
        (children per internal node)
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {},
    }

    for depth, level in enumerate(LevelOrderTraverser().traverse_levels(root)):
        stats['total_nodes'] += len(level)
        stats['leaf_nodes'] += sum(1 for node in level if node.is_leaf())
        stats['depths'][depth] = len(level)
        stats['max_depth'] = depth

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['height'] = stats['max_depth'] + 1
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


def build_tree(structure: Any, node_cls=NaryTreeNode) -> NaryTreeNode:
    """Build a tree from nested ``(value, [children...])`` tuples.

    A 2-tuple whose second item is a list describes an internal node; any
    other object is the value of a leaf.

    Example:
        >>> build_tree(("root", ["a", ("b", ["c"])])).generate_text()
        '[root] ([a], [b] ([c]))'
    """
    if isinstance(structure, tuple) and len(structure) == 2 and isinstance(structure[1], list):
        value, children = structure
        node = node_cls(value)
        for child_structure in children:
            node.add_child(build_tree(child_structure, node_cls))
        return node
    return node_cls(structure)

"""Tree traversal strategies for NaryTreeLib.

Traversers implement different algorithms for walking through a tree of
NaryTreeNode instances. They are lazy: nodes are produced one at a time as
``(node, depth)`` pairs, with depth relative to the starting node.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List, Optional, Tuple, Union

from ..config import TraversalStrategy

if TYPE_CHECKING:
    from .node import NaryTreeNode

logger = logging.getLogger(__name__)


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    No visited set is kept. The tree is assumed to be a proper rooted tree,
    and a node referenced twice by the same parent is visited twice.
    """

    @abstractmethod
    def traverse(self,
                 root: 'NaryTreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['NaryTreeNode', int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children in insertion order. This is the
    order of ``to_prefix_list()``.
    """

    def traverse(self,
                 root: 'NaryTreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['NaryTreeNode', int]]:
        def _traverse_recursive(node: 'NaryTreeNode', depth: int) -> Iterator[Tuple['NaryTreeNode', int]]:
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Every subtree is complete before its
    root is produced, which suits aggregation. This is the order of
    ``to_postfix_list()``.
    """

    def traverse(self,
                 root: 'NaryTreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['NaryTreeNode', int]]:
        def _traverse_recursive(node: 'NaryTreeNode', depth: int) -> Iterator[Tuple['NaryTreeNode', int]]:
            if self._should_explore(depth, max_depth):
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

        yield from _traverse_recursive(root, 0)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Uses a FIFO queue, so all nodes at depth N come before nodes at
    depth N+1. This is the order of ``to_by_width_list()``.
    """

    def traverse(self,
                 root: 'NaryTreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['NaryTreeNode', int]]:
        queue: Deque[Tuple['NaryTreeNode', int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in node.children:
                    queue.append((child, depth + 1))


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    ``traverse`` yields the same sequence as BreadthFirstTraverser but
    completes a whole level before building the next one. ``traverse_levels``
    yields each level as a list.
    """

    def traverse(self,
                 root: 'NaryTreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['NaryTreeNode', int]]:
        for depth, level in enumerate(self.traverse_levels(root, max_depth)):
            if self._should_yield(depth, min_depth, max_depth):
                for node in level:
                    yield (node, depth)

    def traverse_levels(self,
                        root: 'NaryTreeNode',
                        max_depth: Optional[int] = None) -> Iterator[List['NaryTreeNode']]:
        """Yield the nodes of each level, shallowest first.

        Args:
            root: Starting node (the only node of level 0)
            max_depth: Last level to produce (None = all levels)
        """
        current_level: List['NaryTreeNode'] = [root]
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            yield current_level

            next_level: List['NaryTreeNode'] = []
            for node in current_level:
                next_level.extend(node.children)

            current_level = next_level
            current_depth += 1


_STRATEGY_ALIASES = {
    'prefix': TraversalStrategy.PRE_ORDER,
    'pre': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'dfs_pre': TraversalStrategy.PRE_ORDER,
    'postfix': TraversalStrategy.POST_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'dfs_post': TraversalStrategy.POST_ORDER,
    'by_width': TraversalStrategy.BREADTH_FIRST,
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
}

_TRAVERSERS = {
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in _STRATEGY_ALIASES:
        return _STRATEGY_ALIASES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(_STRATEGY_ALIASES.keys())}"
    )


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or one of its string aliases
            (prefix, postfix, by_width, level, bfs, dfs_pre, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    parsed = parse_strategy(strategy)
    traverser = _TRAVERSERS[parsed]()
    logger.debug("Created %s for strategy %s", type(traverser).__name__, parsed.value)
    return traverser

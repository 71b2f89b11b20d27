"""Execution planning for NaryTreeLib traversals.

A TraversalPlan validates a TraversalConfig up front, picks the traverser
for its strategy and applies the configured filters while the traversal
runs.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, Tuple

from ..config import TraversalConfig
from ..errors import InvalidConfigurationError
from .traverser import TreeTraverser, create_traverser

if TYPE_CHECKING:
    from .node import NaryTreeNode

logger = logging.getLogger(__name__)


class TraversalPlan:
    """Validated execution plan for a tree traversal.

    Validation happens in the constructor, before any node is visited, so a
    bad configuration fails even if the returned iterator is never consumed.
    """

    def __init__(self, config: TraversalConfig):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration

        Raises:
            InvalidConfigurationError: If the configuration is inconsistent
        """
        config_errors = config.validate()
        if config_errors:
            raise InvalidConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.config = config
        self.traverser: TreeTraverser = create_traverser(config.strategy)
        self.nodes_processed = 0

    def execute(self, root: 'NaryTreeNode') -> Iterator[Tuple['NaryTreeNode', int]]:
        """Run the traversal from root.

        Yields:
            (node, depth) pairs that pass the depth window and the filters
        """
        depth = self.config.depth
        node_filter = self.config.filter
        self.nodes_processed = 0

        for node, node_depth in self.traverser.traverse(root, depth.max_depth, depth.min_depth):
            self.nodes_processed += 1
            if node_filter.should_include(node):
                yield (node, node_depth)

        logger.debug("%s visited %d nodes", type(self.traverser).__name__, self.nodes_processed)

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the plan, handy for debugging."""
        return {
            'strategy': self.config.strategy.value,
            'traverser': type(self.traverser).__name__,
            'min_depth': self.config.depth.min_depth,
            'max_depth': self.config.depth.max_depth,
            'has_include_filter': self.config.filter.include_filter is not None,
            'has_exclude_filter': self.config.filter.exclude_filter is not None,
            'nodes_processed': self.nodes_processed,
        }

"""Configuration system for NaryTreeLib.

This module defines how callers tune traversals (order, depth window,
filtering) and the renderers (markers and separators of the text formats,
JSON encoder options).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalStrategy(Enum):
    """Order in which a traversal visits nodes."""
    PRE_ORDER = "prefix"        # Parent before children
    POST_ORDER = "postfix"      # Children before parent
    BREADTH_FIRST = "by_width"  # Queue-driven, level by level
    LEVEL_ORDER = "level"       # Breadth-first, grouped by level


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering.

    Depth is relative to the node the traversal starts from (depth 0).
    """

    min_depth: int = 0               # Minimum depth to yield
    max_depth: Optional[int] = None  # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded.

        Args:
            depth: Current depth

        Returns:
            True if depth is within configured range
        """
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children of a node at this depth should be visited."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal.

    Filters only decide which nodes are yielded; excluded nodes are still
    descended into.
    """

    include_filter: Optional[Callable[[Any], bool]] = None
    exclude_filter: Optional[Callable[[Any], bool]] = None

    def should_include(self, node) -> bool:
        """Check if a node passes the filters.

        Exclusion takes precedence over inclusion.
        """
        if self.exclude_filter and self.exclude_filter(node):
            return False
        if self.include_filter:
            return self.include_filter(node)
        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal."""

    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Create config for visiting a node and its first levels only.

        Args:
            max_depth: How deep to go (default 1 = immediate children only)

        Returns:
            Breadth-first TraversalConfig limited to max_depth
        """
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
        )

    @classmethod
    def bottom_up(cls) -> 'TraversalConfig':
        """Create config that yields every subtree before its root.

        Useful when aggregating values upwards.
        """
        return cls(strategy=TraversalStrategy.POST_ORDER)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors


@dataclass
class TextConfig:
    """Tokens of the single-line structural text form.

    The defaults produce ``[root] ([child 1], [child 2])``.
    """

    value_prefix: str = "["
    value_suffix: str = "]"
    value_separator: str = " "
    children_prefix: str = "("
    children_suffix: str = ")"
    children_separator: str = ", "
    null_placeholder: str = "null"


@dataclass
class PrettyTextConfig:
    """Markers of the indented tree diagram."""

    depth_marker: str = "│ "    # Repeated (depth - 1) times
    branch_marker: str = "├─"   # Precedes every non-root value


@dataclass
class JsonConfig:
    """Options handed to the ``json`` encoder.

    ``indent=None`` selects the compact form with no whitespace at all.
    ``default`` is called for values ``json`` cannot encode natively.
    """

    ensure_ascii: bool = False
    default: Optional[Callable[[Any], Any]] = None
    indent: Optional[int] = None

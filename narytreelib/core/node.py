"""NaryTreeNode, the tree abstraction of NaryTreeLib.

There is no separate Tree type: every node is the root of the subtree made
of itself and its descendants, so every query and renderer below applies to
whichever node it is called on.

The structure is assumed to be a proper rooted tree. Nothing checks for
cycles or for a node attached under two parents; keeping the tree proper is
the caller's job.
"""

import logging
from collections import deque
from collections.abc import Sequence
from typing import (
    Any, Deque, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar, Union,
)

from ..config import (
    DepthConfig,
    JsonConfig,
    PrettyTextConfig,
    TextConfig,
    TraversalConfig,
    TraversalStrategy,
)
from ..errors import AbsentValueError, ChildIndexError, ImmutableViewError
from . import render
from .planning import TraversalPlan
from .traverser import LevelOrderTraverser, parse_strategy

logger = logging.getLogger(__name__)

E = TypeVar('E')


class ChildrenView(Sequence):
    """Live, read-only view over a node's children.

    Reading (indexing, slicing, iteration, ``len``, ``in``) behaves like a
    list and reflects later ``add_child`` / ``remove_child`` calls. Every
    mutating list method raises ImmutableViewError.
    """

    __slots__ = ('_items',)

    def __init__(self, items: List['NaryTreeNode']):
        self._items = items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator['NaryTreeNode']:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ChildrenView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"

    def _reject(self, *args, **kwargs):
        raise ImmutableViewError(
            "Children view is read-only; use add_child() or remove_child() instead"
        )

    append = extend = insert = remove = pop = clear = reverse = sort = _reject
    __setitem__ = __delitem__ = __iadd__ = __imul__ = _reject


class NaryTreeNode(Generic[E]):
    """A node with a value and an ordered list of child nodes.

    The value may be absent (None), for a node still awaiting assignment.
    Node equality is identity: two nodes holding equal values are still two
    different nodes.

    Example:
        >>> root = NaryTreeNode("root")
        >>> child = root.add_child("child")
        >>> grandchild = child.add_child("grandchild")
        >>> root.to_prefix_list()
        ['root', 'child', 'grandchild']
        >>> print(root.to_pretty_text(), end="")
        root
        ├─child
        │ ├─grandchild
    """

    def __init__(self, value: Optional[E] = None):
        """Create a leaf node.

        Args:
            value: Payload of the node; omit it (or pass None) for a node
                with an absent value
        """
        self._value = value
        self._children: List['NaryTreeNode[E]'] = []
        self._children_view = ChildrenView(self._children)

    # Accessors

    @property
    def value(self) -> Optional[E]:
        """The payload of this node, None when absent."""
        return self._value

    @value.setter
    def value(self, value: Optional[E]) -> None:
        self._value = value

    @property
    def has_value(self) -> bool:
        """True unless the value is absent."""
        return self._value is not None

    @property
    def children(self) -> ChildrenView:
        """Read-only view of the children, in insertion order."""
        return self._children_view

    @property
    def children_count(self) -> int:
        return len(self._children)

    def get_child(self, index: int) -> 'NaryTreeNode[E]':
        """Return the child at index.

        Raises:
            ChildIndexError: If index is outside [0, children_count)
        """
        self._check_index(index)
        return self._children[index]

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return not self._children

    # Mutation

    def add_child(self, child: Union['NaryTreeNode[E]', E]) -> 'NaryTreeNode[E]':
        """Append a child as the last one.

        No cycle check is performed; the caller must not attach a node under
        itself or under two parents.

        Args:
            child: An existing node, appended as-is, or a value, wrapped in a
                new node of this node's class

        Returns:
            The appended node
        """
        node = child if isinstance(child, NaryTreeNode) else type(self)(child)
        self._children.append(node)
        logger.debug("Added child %r to %r", node, self)
        return node

    def remove_child(self, child: 'NaryTreeNode[E]') -> None:
        """Remove the first child that is the given node.

        Does nothing if the node is not a child of this node.
        """
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                logger.debug("Removed child %r from %r", child, self)
                return

    def remove_child_at(self, index: int) -> 'NaryTreeNode[E]':
        """Remove and return the child at index.

        Raises:
            ChildIndexError: If index is outside [0, children_count)
        """
        self._check_index(index)
        removed = self._children.pop(index)
        logger.debug("Removed child %r at index %d from %r", removed, index, self)
        return removed

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._children):
            raise ChildIndexError(index, len(self._children))

    # Structural queries

    def get_height(self) -> int:
        """Height counted in nodes: a leaf has height 1."""
        if self.is_leaf():
            return 1
        return 1 + max(child.get_height() for child in self._children)

    def get_size(self) -> int:
        """Number of nodes in this subtree, this node included."""
        if self.is_leaf():
            return 1
        return 1 + sum(child.get_size() for child in self._children)

    def get_number_of_nodes(self) -> int:
        """Number of nodes in this subtree; same as get_size()."""
        if self.is_leaf():
            return 1
        return 1 + sum(child.get_number_of_nodes() for child in self._children)

    def get_number_of_leaves(self) -> int:
        """Number of leaves in this subtree (internal nodes count 0)."""
        if self.is_leaf():
            return 1
        return sum(child.get_number_of_leaves() for child in self._children)

    def contains(self, target: E) -> bool:
        """Check if this node or a descendant holds a value equal to target.

        Searches depth-first, comparing with ``==``.

        Raises:
            AbsentValueError: If the search reaches a node with no value
                before finding a match
        """
        if not self.has_value:
            raise AbsentValueError("contains")
        if self._value == target:
            return True
        return any(child.contains(target) for child in self._children)

    def get_node_from_element(self, element: E) -> Optional['NaryTreeNode[E]']:
        """Find the first node, in pre-order, whose value is element.

        Unlike contains(), this compares by identity (``is``), so a node
        holding an equal but distinct object does not match. CPython interns
        small ints and short strings, so equal literals may be identical.

        Returns:
            The matching node, or None
        """
        if self._value is element:
            return self
        for child in self._children:
            found = child.get_node_from_element(element)
            if found is not None:
                return found
        return None

    # Traversal producers

    def to_postfix_list(self) -> List[Optional[E]]:
        """Values with every node after its children; this value comes last."""
        values: List[Optional[E]] = []
        for child in self._children:
            values.extend(child.to_postfix_list())
        values.append(self._value)
        return values

    def to_prefix_list(self) -> List[Optional[E]]:
        """Values with every node before its children; this value comes first."""
        values: List[Optional[E]] = [self._value]
        for child in self._children:
            values.extend(child.to_prefix_list())
        return values

    def to_by_width_list(self) -> List[Optional[E]]:
        """Values in breadth-first (level) order, starting with this node."""
        values: List[Optional[E]] = []
        queue: Deque['NaryTreeNode[E]'] = deque([self])
        while queue:
            node = queue.popleft()
            values.append(node._value)
            queue.extend(node._children)
        return values

    def to_level_lists(self) -> List[List[Optional[E]]]:
        """Values grouped by level: ``[[root], [children...], ...]``."""
        return [
            [node._value for node in level]
            for level in LevelOrderTraverser().traverse_levels(self)
        ]

    def traverse(self,
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['NaryTreeNode[E]', int]]:
        """Lazily walk this subtree.

        Args:
            strategy: TraversalStrategy or alias ("prefix", "postfix",
                "by_width", "level", ...)
            max_depth: Deepest level to visit (None = unlimited)
            min_depth: Shallowest level to yield

        Returns:
            Iterator of (node, depth) pairs, depth 0 being this node

        Raises:
            ValueError: If strategy is unknown
            InvalidConfigurationError: If the depth window is invalid
        """
        config = TraversalConfig(
            strategy=parse_strategy(strategy),
            depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        )
        return TraversalPlan(config).execute(self)

    # Rendering

    def generate_text(self, config: Optional[TextConfig] = None) -> str:
        """Single-line structural form, e.g. ``[root] ([a], [b])``."""
        return render.generate_text(self, config)

    def to_dict(self) -> Dict[str, Any]:
        return render.to_dict(self)

    def to_json(self, config: Optional[JsonConfig] = None) -> str:
        """Compact JSON form, e.g. ``{"value":"root","children":[{"value":"a"}]}``.

        Raises:
            TreeEncodingError: If a value cannot be encoded
        """
        return render.to_json(self, config)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'NaryTreeNode':
        """Rebuild a tree from the structure returned by to_dict()."""
        return render.from_dict(data, cls)

    @classmethod
    def from_json(cls, text: str) -> 'NaryTreeNode':
        """Rebuild a tree from the output of to_json().

        Raises:
            TreeDecodingError: If text is not a JSON-encoded tree
        """
        return render.from_json(text, cls)

    def to_pretty_text(self, config: Optional[PrettyTextConfig] = None) -> str:
        """Multi-line indented diagram of this subtree.

        Raises:
            AbsentValueError: If a node in the subtree has no value
        """
        return render.to_pretty_text(self, config)

    def to_debug_string(self) -> str:
        """Nested ``NaryTreeNode{value=..., children=[...]}`` form.

        Raises:
            AbsentValueError: If a node in the subtree has no value
        """
        return render.to_debug_string(self)

    def __str__(self) -> str:
        return self.to_debug_string()

    def __repr__(self) -> str:
        """Short form for debugging; safe on nodes without a value."""
        return f"{self.__class__.__name__}(value={self._value!r}, children={len(self._children)})"

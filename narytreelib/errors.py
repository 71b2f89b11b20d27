"""Exception types raised by NaryTreeLib.

Every error derives from NaryTreeError and also from the builtin exception
it specializes, so callers may catch either ``ChildIndexError`` or plain
``IndexError``.
"""


class NaryTreeError(Exception):
    """Base class for all NaryTreeLib errors."""
    pass


class ChildIndexError(NaryTreeError, IndexError):
    """Raised when a child index falls outside ``[0, children_count)``."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(
            f"Child index {index} out of range for node with {count} "
            f"child{'ren' if count != 1 else ''}"
        )


class ImmutableViewError(NaryTreeError, TypeError):
    """Raised when a caller tries to mutate a read-only children view.

    Children are changed through ``add_child`` / ``remove_child`` only.
    """
    pass


class AbsentValueError(NaryTreeError, ValueError):
    """Raised when an operation needs a node's value but the node has none."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"{operation}() requires a value, but the node was created without one"
        )


class TreeEncodingError(NaryTreeError, ValueError):
    """Raised when a node value cannot be encoded as JSON."""
    pass


class TreeDecodingError(NaryTreeError, ValueError):
    """Raised when JSON input does not describe a tree."""
    pass


class InvalidConfigurationError(NaryTreeError, ValueError):
    """Raised when a traversal configuration fails validation."""
    pass

"""Testing utilities for NaryTreeLib consumers."""

from .fixtures import alphabet_tree, numbered_text_tree, pretty_sample_tree

__all__ = ['alphabet_tree', 'numbered_text_tree', 'pretty_sample_tree']

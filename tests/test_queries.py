"""Unit tests for the structural queries of NaryTreeNode.

Height, size, leaf counts, equality search (contains) and identity search
(get_node_from_element).
"""

import pytest

from narytreelib import NaryTreeNode, AbsentValueError
from narytreelib.testing import alphabet_tree


@pytest.fixture
def root_with_child():
    """Two-node tree: root > child."""
    root = NaryTreeNode("root")
    root.add_child("child")
    return root


class TestCounts:
    """Size, height and leaf counts."""

    def test_leaf_counts(self):
        """A lone node counts as one node, one leaf, height one."""
        leaf = NaryTreeNode("leaf")
        assert leaf.get_height() == 1
        assert leaf.get_size() == 1
        assert leaf.get_number_of_nodes() == 1
        assert leaf.get_number_of_leaves() == 1

    def test_height(self, root_with_child):
        assert root_with_child.get_height() == 2

    def test_size(self, root_with_child):
        assert root_with_child.get_size() == 2

    def test_number_of_leaves(self, root_with_child):
        """The root is internal, so only the child counts."""
        assert root_with_child.get_number_of_leaves() == 1

    def test_number_of_nodes(self, root_with_child):
        assert root_with_child.get_number_of_nodes() == 2

    def test_alphabet_tree_counts(self):
        root, nodes = alphabet_tree()
        assert root.get_size() == 13
        assert root.get_number_of_nodes() == 13
        assert root.get_height() == 4
        assert root.get_number_of_leaves() == 9

    def test_subtree_counts(self):
        """Queries on an inner node only see its subtree."""
        _, nodes = alphabet_tree()
        assert nodes["B"].get_size() == 8
        assert nodes["B"].get_height() == 3
        assert nodes["B"].get_number_of_leaves() == 6
        assert nodes["C"].get_height() == 2

    def test_height_follows_deepest_branch(self):
        """Height is decided by the deepest child, not the first one."""
        root = NaryTreeNode(0)
        root.add_child(1)
        deep = root.add_child(2)
        deep.add_child(3).add_child(4)
        assert root.get_height() == 4

    def test_counts_ignore_absent_values(self):
        """Counting never looks at values."""
        root = NaryTreeNode()
        root.add_child(NaryTreeNode())
        root.add_child(NaryTreeNode())
        assert root.get_size() == 3
        assert root.get_height() == 2
        assert root.get_number_of_leaves() == 2

    def test_duplicate_references_counted_twice(self):
        """A child attached twice is counted at each position."""
        root = NaryTreeNode("root")
        shared = NaryTreeNode("shared")
        root.add_child(shared)
        root.add_child(shared)
        assert root.get_size() == 3
        assert root.get_number_of_leaves() == 2


class TestContains:
    """Equality-based search."""

    def test_contains(self, root_with_child):
        assert root_with_child.contains("root")
        assert root_with_child.contains("child")
        assert not root_with_child.contains("not found")

    def test_contains_uses_equality(self):
        """An equal but distinct object is found."""
        root = NaryTreeNode([1, 2])
        root.add_child([3])
        assert root.contains([3])
        assert root.contains([1, 2])

    def test_contains_deep_value(self):
        root, _ = alphabet_tree()
        assert root.contains("M")
        assert root.contains("J")
        assert not root.contains("Z")

    def test_contains_on_subtree(self):
        """A subtree does not see its siblings."""
        _, nodes = alphabet_tree()
        assert nodes["C"].contains("H")
        assert not nodes["C"].contains("K")

    def test_contains_matches_prefix_list(self):
        """contains(v) holds exactly for the values of the prefix list."""
        root, _ = alphabet_tree()
        values = root.to_prefix_list()
        for candidate in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
            assert root.contains(candidate) == (candidate in values)

    def test_contains_on_absent_value_raises(self):
        with pytest.raises(AbsentValueError):
            NaryTreeNode().contains("anything")

    def test_contains_stops_before_absent_value(self):
        """A match found before reaching an absent value is returned."""
        root = NaryTreeNode("root")
        root.add_child(NaryTreeNode())
        assert root.contains("root")

    def test_contains_reaching_absent_value_raises(self):
        root = NaryTreeNode("root")
        root.add_child(NaryTreeNode())
        with pytest.raises(AbsentValueError):
            root.contains("missing")


class TestGetNodeFromElement:
    """Identity-based search."""

    def test_finds_every_node(self):
        root, nodes = alphabet_tree()
        for letter, node in nodes.items():
            assert root.get_node_from_element(node.value) is node

    def test_missing_element(self):
        root, _ = alphabet_tree()
        assert root.get_node_from_element("Z") is None

    def test_identity_not_equality(self):
        """An equal but distinct object does not match."""
        key = [1]
        root = NaryTreeNode([0])
        child = root.add_child(key)

        assert root.get_node_from_element(key) is child
        assert root.get_node_from_element([1]) is None
        assert root.contains([1])

    def test_first_match_in_pre_order(self):
        """With several identical values the pre-order first one wins."""
        key = object()
        root = NaryTreeNode("root")
        first_branch = root.add_child("branch")
        first = first_branch.add_child(key)
        second = root.add_child(key)

        assert root.get_node_from_element(key) is first
        assert second.get_node_from_element(key) is second

    def test_self_before_children(self):
        key = object()
        root = NaryTreeNode(key)
        root.add_child(key)
        assert root.get_node_from_element(key) is root

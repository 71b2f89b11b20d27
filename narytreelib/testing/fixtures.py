"""Sample trees for NaryTreeLib consumers' test suites.

Each fixture builds a fresh tree on every call, so tests may mutate what
they get back.
"""

from typing import Dict, Tuple

from ..core.node import NaryTreeNode


def alphabet_tree() -> Tuple[NaryTreeNode, Dict[str, NaryTreeNode]]:
    """Build the 13-node letter tree.

    Structure::

        A
        ├─B
        │ ├─D
        │ │ ├─K
        │ │ ├─L
        │ │ ├─M
        │ ├─E
        │ ├─F
        │ ├─G
        ├─C
        │ ├─H
        │ ├─I
        │ ├─J

    Returns:
        (root, nodes) where nodes maps each letter to its node
    """
    nodes = {letter: NaryTreeNode(letter) for letter in "ABCDEFGHIJKLM"}
    edges = {
        "A": "BC",
        "B": "DEFG",
        "C": "HIJ",
        "D": "KLM",
    }
    for parent, children in edges.items():
        for child in children:
            nodes[parent].add_child(nodes[child])
    return nodes["A"], nodes


def pretty_sample_tree() -> NaryTreeNode:
    """Build the tree used to exercise the pretty diagram.

    Structure::

        root
        ├─child1
        │ ├─subChild11
        │ ├─subChild12
        ├─child2
        │ ├─subChild21
        │ │ ├─subSubChild211
        │ ├─subChild22
        ├─child3
    """
    root = NaryTreeNode("root")
    child1 = root.add_child("child1")
    child1.add_child("subChild11")
    child1.add_child("subChild12")
    child2 = root.add_child("child2")
    sub_child21 = child2.add_child("subChild21")
    sub_child21.add_child("subSubChild211")
    child2.add_child("subChild22")
    root.add_child("child3")
    return root


def numbered_text_tree(count: int = 10) -> NaryTreeNode:
    """Build ``root`` > ``child 1`` > numbered leaves, nested twice.

    "child 1" gets leaves "0".."count-1" followed by a second "child 1"
    that has the same numbered leaves.
    """
    root = NaryTreeNode("root")
    child1 = root.add_child("child 1")
    for i in range(count):
        child1.add_child(str(i))
    child2 = child1.add_child("child 1")
    for i in range(count):
        child2.add_child(str(i))
    return root

#!/usr/bin/env python
"""
Basic usage of NaryTreeLib.

Builds a small tree, queries it and prints it in every text form.
"""

from narytreelib import NaryTreeNode, get_tree_stats


def main():
    root = NaryTreeNode("project")
    src = root.add_child("src")
    src.add_child("main.py")
    src.add_child("util.py")
    docs = root.add_child("docs")
    docs.add_child("index.md")

    print("Structure:")
    print(root.to_pretty_text())

    print(f"Size: {root.get_size()}, height: {root.get_height()}, "
          f"leaves: {root.get_number_of_leaves()}")
    print(f"Prefix:   {root.to_prefix_list()}")
    print(f"Postfix:  {root.to_postfix_list()}")
    print(f"By width: {root.to_by_width_list()}")

    print(f"Text: {root.generate_text()}")
    print(f"JSON: {root.to_json()}")

    for key, value in get_tree_stats(root).items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()

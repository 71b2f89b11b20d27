"""Renderers for NaryTreeLib.

Turns a tree into one of its textual forms and back:

- structural text: ``[root] ([child 1], [child 2])``
- JSON: ``{"value":"root","children":[{"value":"child"}]}``
- pretty diagram: one line per node, indented with box-drawing markers
- debug form: ``NaryTreeNode{value=root, children=[]}``

The functions here work on any object exposing ``value``, ``has_value``,
``children`` and ``is_leaf()``; NaryTreeNode delegates to them.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from ..config import JsonConfig, PrettyTextConfig, TextConfig
from ..errors import AbsentValueError, TreeDecodingError, TreeEncodingError

logger = logging.getLogger(__name__)

N = TypeVar('N')

VALUE_KEY = "value"
CHILDREN_KEY = "children"


def _require_value(node, operation: str) -> str:
    """Return the display form of node's value, failing if it has none."""
    if not node.has_value:
        raise AbsentValueError(operation)
    return str(node.value)


def generate_text(node, config: Optional[TextConfig] = None) -> str:
    """Render a subtree on a single line.

    A leaf renders as ``[value]``; an internal node as
    ``[value] (child, child, ...)`` with each child rendered the same way.
    An absent value shows the null placeholder.
    """
    config = config or TextConfig()
    shown = str(node.value) if node.has_value else config.null_placeholder
    text = config.value_prefix + shown + config.value_suffix
    if node.is_leaf():
        return text

    rendered_children = config.children_separator.join(
        generate_text(child, config) for child in node.children
    )
    return (text + config.value_separator
            + config.children_prefix + rendered_children + config.children_suffix)


def to_dict(node) -> Dict[str, Any]:
    """Build the JSON-shaped dictionary of a subtree.

    The ``children`` key is present only when the node has children.
    """
    data: Dict[str, Any] = {VALUE_KEY: node.value}
    if not node.is_leaf():
        data[CHILDREN_KEY] = [to_dict(child) for child in node.children]
    return data


def to_json(node, config: Optional[JsonConfig] = None) -> str:
    """Encode a subtree as JSON.

    With the default config the output is compact:
    ``{"value":"root","children":[{"value":"child"}]}``.

    Raises:
        TreeEncodingError: If a value cannot be encoded (unsupported type,
            NaN or infinity)
    """
    config = config or JsonConfig()
    separators = (",", ":") if config.indent is None else None
    try:
        return json.dumps(
            to_dict(node),
            ensure_ascii=config.ensure_ascii,
            default=config.default,
            indent=config.indent,
            separators=separators,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise TreeEncodingError(f"Cannot encode tree as JSON: {e}") from e


def from_dict(data: Mapping[str, Any], node_cls: Type[N]) -> N:
    """Rebuild a tree from the structure produced by ``to_dict``.

    Args:
        data: Mapping with an optional ``value`` key and an optional
            ``children`` list of further mappings
        node_cls: Node class to instantiate for every node

    Raises:
        TreeDecodingError: If the data does not describe a tree
    """
    if not isinstance(data, Mapping):
        raise TreeDecodingError(
            f"Expected a JSON object for a node, got {type(data).__name__}"
        )

    unexpected = set(data) - {VALUE_KEY, CHILDREN_KEY}
    if unexpected:
        raise TreeDecodingError(
            f"Unexpected keys in node object: {', '.join(sorted(map(str, unexpected)))}"
        )

    children = data.get(CHILDREN_KEY, [])
    if not isinstance(children, list):
        raise TreeDecodingError(
            f"'{CHILDREN_KEY}' must be an array, got {type(children).__name__}"
        )

    node = node_cls(data.get(VALUE_KEY))
    for child_data in children:
        node.add_child(from_dict(child_data, node_cls))
    return node


def from_json(text: str, node_cls: Type[N]) -> N:
    """Decode a tree from JSON text produced by ``to_json``.

    Raises:
        TreeDecodingError: If the text is not valid JSON or not a tree
    """
    try:
        data = json.loads(text)
    except ValueError as e:
        raise TreeDecodingError(f"Invalid JSON: {e}") from e

    node = from_dict(data, node_cls)
    logger.debug("Decoded %s from %d characters of JSON", node_cls.__name__, len(text))
    return node


def to_pretty_text(node, config: Optional[PrettyTextConfig] = None) -> str:
    """Render a subtree as an indented diagram.

    The root line holds the bare value. A node at depth d (root's children
    are depth 1) gets ``depth_marker * (d - 1) + branch_marker`` in front
    of its value. Every line ends with a newline::

        root
        ├─child1
        │ ├─subChild11
        ├─child2

    Raises:
        AbsentValueError: If any node in the subtree has no value
    """
    config = config or PrettyTextConfig()
    lines = [_require_value(node, "to_pretty_text") + "\n"]
    for child in node.children:
        _append_pretty_lines(child, 1, config, lines)
    return "".join(lines)


def _append_pretty_lines(node, depth: int, config: PrettyTextConfig, lines: List[str]) -> None:
    lines.append(
        config.depth_marker * (depth - 1)
        + config.branch_marker
        + _require_value(node, "to_pretty_text")
        + "\n"
    )
    for child in node.children:
        _append_pretty_lines(child, depth + 1, config, lines)


def to_debug_string(node) -> str:
    """Render ``TypeName{value=<value>, children=[...]}`` recursively.

    Raises:
        AbsentValueError: If any node in the subtree has no value
    """
    value = _require_value(node, "to_debug_string")
    children = ", ".join(to_debug_string(child) for child in node.children)
    return f"{type(node).__name__}{{value={value}, children=[{children}]}}"

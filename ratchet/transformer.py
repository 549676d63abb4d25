"""Bind data to a parsed template tree."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, List, Optional, Sequence, Union

from markupsafe import Markup

from . import data
from .dom_model import BoundText, DomContent, Node
from .element import apply

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "data-prop"


def binding_name(node: Node, marker: str = DEFAULT_MARKER) -> Optional[str]:
    """Return the property named by the node's first marker attribute."""

    for name, value in node.attrs:
        if name == marker:
            return str(value)
    return None


def transform_children(
    children: Iterable[DomContent], context: Any, marker: str = DEFAULT_MARKER
) -> List[DomContent]:
    transformed: List[DomContent] = []
    for child in children:
        if not isinstance(child, Node):
            transformed.append(child)
            continue
        result = transform_node(child, context, marker)
        if isinstance(result, list):
            transformed.extend(result)
        else:
            transformed.append(result)
    return transformed


def _bind_item(node: Node, item: Any, marker: str) -> Node:
    attrs = data.merge_attributes(item, node.attrs)
    if data.is_content(item):
        text = data.content(item)
        child = text if isinstance(text, Markup) else BoundText(text)
        return apply(replace(node, attrs=attrs), child)
    return Node(node.tag, attrs, tuple(transform_children(node.children, item, marker)))


def transform_node(
    node: Node, context: Any, marker: str = DEFAULT_MARKER
) -> Union[Node, List[Node]]:
    """Transform one node; a list-valued binding yields sibling nodes."""

    name = binding_name(node, marker)
    value = None if name is None else data.property(context, name)
    if value is None:
        if name is not None:
            logger.debug("No data for %s=%r on <%s>", marker, name, node.tag)
        return Node(node.tag, node.attrs, tuple(transform_children(node.children, context, marker)))

    items = data.prepare(value)
    logger.debug("Binding <%s> to %r with %d item(s)", node.tag, name, len(items))
    nodes = [_bind_item(node, item, marker) for item in items]
    if len(nodes) == 1:
        return nodes[0]
    return nodes


def transform(
    tree: Union[Node, Sequence[DomContent]], context: Any, marker: str = DEFAULT_MARKER
) -> Union[Node, List[Node], List[DomContent]]:
    """Transform a single node or a list of top-level nodes against ``context``."""

    if isinstance(tree, Node):
        return transform_node(tree, context, marker)
    return transform_children(tree, context, marker)


__all__ = [
    "DEFAULT_MARKER",
    "binding_name",
    "transform",
    "transform_children",
    "transform_node",
]

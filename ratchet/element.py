"""Apply resolved content to template elements."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Union

from .dom_model import Node


def apply(node: Node, content: Any) -> Union[Node, List[Node]]:
    """Give ``node`` the content as its only child.

    A list of content yields one copy of the node per item.

        >>> apply(Node("div"), "Content")
        Node(tag='div', attrs=(), children=('Content',))
    """

    if isinstance(content, list):
        nodes: List[Node] = []
        for item in content:
            applied = apply(node, item)
            if isinstance(applied, list):
                nodes.extend(applied)
            else:
                nodes.append(applied)
        return nodes
    return replace(node, children=(content,))


__all__ = ["apply"]

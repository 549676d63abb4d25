"""Immutable DOM model and HTML serialization."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

from markupsafe import Markup, escape

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# Regions left untouched for the expression evaluation step.
EXPRESSION_RE = re.compile(r"({{.*?}}|{%.*?%})", re.DOTALL)


class BoundText(str):
    """Text content that came from bound data rather than the template."""

    __slots__ = ()


@dataclass(frozen=True)
class Node:
    tag: str
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["DomContent", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", tuple(tuple(pair) for pair in self.attrs))
        object.__setattr__(self, "children", tuple(self.children))


DomContent = Union[Node, str, None]


def escape_data(value: object) -> Markup:
    """Escape a value taken from data; template delimiters are neutralised."""

    if isinstance(value, Markup):
        return value
    if value is None:
        return Markup("")
    escaped = str(escape(str(value)))
    return Markup(escaped.replace("{", "&#123;").replace("}", "&#125;"))


def escape_template(value: object) -> Markup:
    """Escape template text while keeping embedded expressions intact."""

    if isinstance(value, Markup):
        return value
    if value is None:
        return Markup("")
    parts = EXPRESSION_RE.split(str(value))
    # Odd indexes hold the captured expression regions.
    return Markup(
        "".join(part if index % 2 else str(escape(part)) for index, part in enumerate(parts))
    )


def _render_attrs(attrs: Iterable[Tuple[str, object]]) -> str:
    parts = [f'{escape(name)}="{escape_template(value)}"' for name, value in attrs]
    if not parts:
        return ""
    return " " + " ".join(parts)


def _render_child(child: DomContent) -> str:
    if child is None:
        return ""
    if isinstance(child, Node):
        return dom_to_html([child])
    if isinstance(child, BoundText):
        return escape_data(child)
    return escape_template(child)


def dom_to_html(dom: Union[Node, str, Iterable[DomContent]]) -> str:
    if isinstance(dom, (Node, str)):
        dom = [dom]
    parts: List[str] = []
    for node in dom:
        if not isinstance(node, Node):
            parts.append(_render_child(node))
            continue
        attrs = _render_attrs(node.attrs)
        if node.tag in VOID_ELEMENTS and not node.children:
            parts.append(f"<{node.tag}{attrs}>")
            continue
        parts.append(f"<{node.tag}{attrs}>")
        parts.extend(_render_child(child) for child in node.children)
        parts.append(f"</{node.tag}>")
    return "".join(parts)


__all__ = [
    "BoundText",
    "DomContent",
    "Node",
    "VOID_ELEMENTS",
    "dom_to_html",
    "escape_data",
    "escape_template",
]

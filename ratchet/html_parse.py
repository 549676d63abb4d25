"""Parse HTML templates into the immutable DOM model.

BeautifulSoup does the tokenizing; this module only maps its tree onto
:class:`~ratchet.dom_model.Node` values. Attribute order is preserved and
multi-valued attributes such as ``class`` stay plain strings so the
serializer writes back what the template said.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction
from markupsafe import Markup

from .dom_model import DomContent, Node

RAW_TEXT_ELEMENTS = {"script", "style"}


def _attr_value(value: object) -> str:
    if isinstance(value, list):
        return " ".join(value)
    return "" if value is None else str(value)


def _convert(element: object) -> DomContent:
    if isinstance(element, Tag):
        children = [_convert(child) for child in element.contents]
        return Node(
            tag=element.name,
            attrs=tuple((name, _attr_value(value)) for name, value in element.attrs.items()),
            children=tuple(child for child in children if child is not None),
        )
    if isinstance(element, Doctype):
        return Markup(f"<!DOCTYPE {element}>")
    if isinstance(element, Comment):
        return Markup(f"<!--{element}-->")
    if isinstance(element, CData):
        return Markup(f"<![CDATA[{element}]]>")
    if isinstance(element, ProcessingInstruction):
        return Markup(f"<?{element}>")
    if isinstance(element, Declaration):
        return Markup(f"<!{element}>")
    if isinstance(element, NavigableString):
        parent = element.parent
        if parent is not None and parent.name in RAW_TEXT_ELEMENTS:
            return Markup(str(element))
        return str(element)
    return None


def parse(markup: str, features: str = "html.parser") -> List[DomContent]:
    """Parse a template string into a list of top-level nodes and text."""

    soup = BeautifulSoup(markup, features, multi_valued_attributes=None)
    converted = [_convert(element) for element in soup.contents]
    return [item for item in converted if item is not None]


__all__ = ["parse"]

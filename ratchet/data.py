"""Accessors for the data bound to template nodes.

Data comes in the following forms:

1. A mapping of property names to data values
2. A 2-tuple whose first element is such a mapping and whose second element
   holds data attributes
3. A string of text content, optionally paired with data attributes in the
   same way: ``("Read more", [("href", "/posts")])``
4. A list of attribute pairs, e.g. ``[("href", "/"), ("rel", "nofollow")]``
5. A list of any of the above, rendered as one element per item
6. Something else, which binds nothing

Every function here accepts any value and falls back to a neutral result for
shapes it does not recognise.

    >>> property({"foo": "bar"}, "foo")
    'bar'
    >>> property(({"foo": "bar"}, []), "foo")
    'bar'
    >>> property(("Content", []), "foo") is None
    True
    >>> prepare(None)
    [None]
    >>> prepare([("href", "/")])
    [[('href', '/')]]
    >>> prepare(["one", "two"])
    ['one', 'two']
    >>> is_content(("text", [("href", "/foo/bar")]))
    True
    >>> str(attributes([("href", "/")], [("data-prop", "link")]))
    'href="/" data-prop="link"'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from markupsafe import Markup, escape

from .dom_model import escape_data, escape_template

AttributeSet = Tuple[Tuple[Markup, Markup], ...]

_CONTAINERS = (list, tuple, Mapping)


def _is_attribute_pair(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], str)
        and not isinstance(value[1], _CONTAINERS)
    )


def _split_pair(value: Any) -> Optional[Tuple[Any, Any]]:
    """Return ``(data, attrs)`` when value carries data attributes."""

    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[1], _CONTAINERS):
        return value[0], value[1]
    return None


def is_attribute_list(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and _is_attribute_pair(value[0])


def property(context: Any, name: str) -> Any:
    """Get the named property from the given data, or ``None`` when absent."""

    pair = _split_pair(context)
    if pair is not None and isinstance(pair[0], Mapping):
        return pair[0].get(name)
    if isinstance(context, Mapping):
        return context.get(name)
    return None


def prepare(value: Any) -> List[Any]:
    """Wrap data in a list so it can always be rendered item by item.

    A list of attribute pairs describes one element, so it is wrapped as a
    single item rather than expanded.
    """

    if value is None:
        return [None]
    if is_attribute_list(value):
        return [value]
    if isinstance(value, list):
        return value
    return [value]


def is_content(value: Any) -> bool:
    """Determine whether the data provides plain text content."""

    if isinstance(value, str):
        return True
    pair = _split_pair(value)
    return pair is not None and isinstance(pair[0], str)


def content(value: Any) -> str:
    if isinstance(value, str):
        return value
    pair = _split_pair(value)
    if pair is not None and isinstance(pair[0], str):
        return pair[0]
    raise TypeError(f"no text content in {type(value).__name__} data")


def _pairs(attrs: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(attrs, Mapping):
        return attrs.items()
    return [pair for pair in attrs if isinstance(pair, tuple) and len(pair) == 2]


def _data_attributes(value: Any) -> Iterable[Tuple[Any, Any]]:
    pair = _split_pair(value)
    if pair is not None:
        return _pairs(pair[1])
    if is_attribute_list(value):
        return _pairs(value)
    return ()


def merge_attributes(value: Any, element_attrs: Iterable[Tuple[str, Any]]) -> AttributeSet:
    """Escaped attributes for an element: data attributes first, then its own."""

    merged = [(escape_data(name), escape_data(attr)) for name, attr in _data_attributes(value)]
    merged.extend((escape(str(name)), escape_template(attr)) for name, attr in element_attrs)
    return tuple(merged)


def attributes(value: Any, element_attrs: Iterable[Tuple[str, Any]]) -> Markup:
    """Build the safe attribute string for an element bound to ``value``."""

    return Markup(" ").join(
        Markup(f'{name}="{attr}"') for name, attr in merge_attributes(value, element_attrs)
    )


__all__ = [
    "AttributeSet",
    "attributes",
    "content",
    "is_attribute_list",
    "is_content",
    "merge_attributes",
    "prepare",
    "property",
]

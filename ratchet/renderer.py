"""Render HTML templates with data.

Rendering runs four steps in order: parse the template, bind data to the
parsed tree, serialize the tree back to markup, and evaluate any embedded
Jinja expressions left in that markup. Errors raised by the parser or by
Jinja are not caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Union

from jinja2 import Environment, StrictUndefined, Undefined

from .dom_model import DomContent, Node, dom_to_html
from .html_parse import parse as parse_html
from .models import RenderSettings
from .transformer import transform

logger = logging.getLogger(__name__)


def _template_variables(data: Any) -> dict:
    variables = {}
    if isinstance(data, Mapping):
        variables.update((key, value) for key, value in data.items() if isinstance(key, str))
    variables["data"] = data
    return variables


class Renderer:
    """Template renderer bound to one set of :class:`RenderSettings`."""

    def __init__(self, settings: Optional[RenderSettings] = None) -> None:
        self.settings = settings or RenderSettings()
        self._env: Optional[Environment] = None

    @property
    def env(self) -> Environment:
        """Jinja environment used to evaluate embedded expressions."""

        if self._env is None:
            self._env = Environment(
                autoescape=True,
                trim_blocks=self.settings.trim_blocks,
                lstrip_blocks=self.settings.lstrip_blocks,
                undefined=StrictUndefined if self.settings.strict_undefined else Undefined,
            )
        return self._env

    def parse(self, template: str) -> List[DomContent]:
        return parse_html(template, features=self.settings.parser_features)

    def transform(self, tree: Union[Node, Sequence[DomContent]], data: Any) -> Any:
        return transform(tree, data, marker=self.settings.marker)

    def compile(self, tree: Any) -> str:
        """Compile markup from a transformed tree."""

        return dom_to_html(tree)

    def evaluate(self, markup: str, data: Any) -> str:
        return self.env.from_string(markup).render(_template_variables(data))

    def render(self, template: str, data: Any) -> str:
        """Render a template to markup given data."""

        tree = self.parse(template)
        markup = self.compile(self.transform(tree, data))
        if not self.settings.evaluate:
            logger.debug("Expression evaluation disabled; returning bound markup")
            return markup
        return self.evaluate(markup, data)


def parse(template: str) -> List[DomContent]:
    return Renderer().parse(template)


def compile(tree: Any) -> str:
    return Renderer().compile(tree)


def evaluate(markup: str, data: Any) -> str:
    return Renderer().evaluate(markup, data)


def render(template: str, data: Any, settings: Optional[RenderSettings] = None) -> str:
    return Renderer(settings).render(template, data)


__all__ = ["Renderer", "compile", "evaluate", "parse", "render"]

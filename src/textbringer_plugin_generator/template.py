"""Lightweight string templating utilities."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
    "ruby_string",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")
# Ruby interpolates "#{...}", "#@ivar" and "#$global" inside double quotes.
_RUBY_INTERPOLATION = re.compile(r"#(?=[{@$])")


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot evaluate a placeholder."""


def ruby_string(value: Any) -> str:
    """Return ``value`` as a double quoted Ruby string literal."""

    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    text = _RUBY_INTERPOLATION.sub(r"\\#", text)
    return f'"{text}"'


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates with ``{{ placeholder|filters }}`` expressions.

    Ruby's own ``#{...}`` interpolation and block braces pass through untouched;
    only double braces are placeholders.
    """

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update({"ruby": ruby_string})

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        Every placeholder must name a key of ``context``; an unknown key or
        filter raises :class:`TemplateRenderingError`.
        """

        def substitute(match: re.Match[str]) -> str:
            expression = match.group("expression")
            key, *filters = [part.strip() for part in expression.split("|")]
            try:
                value = context[key]
            except KeyError as exc:
                raise TemplateRenderingError(f"missing value for '{key}'") from exc

            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

"""Jinja2 integration for embedding elements in templates."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .elements import HtmlElement
from .render import render_element


def _render_filter(element: HtmlElement) -> Markup:
    return Markup(render_element(element))


def template_environment(
    search_path: Union[Path, str, Iterable[Union[Path, str]]],
) -> Environment:
    """Create an autoescaping environment that understands elements.

    Elements implement ``__html__``, so ``{{ element }}`` inserts the rendered
    markup as-is while plain strings are escaped. ``{{ element | render }}``
    is available for explicitness.
    """

    if isinstance(search_path, (str, Path)):
        search_path = [search_path]
    env = Environment(
        loader=FileSystemLoader([Path(p) for p in search_path]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )
    env.filters["render"] = _render_filter
    return env


def render_template(env: Environment, name: str, **context: Any) -> str:
    return env.get_template(name).render(**context)


__all__ = ["render_template", "template_environment"]

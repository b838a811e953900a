"""Escaping primitives for text content and attribute values."""

from __future__ import annotations

import html


def escape_markup(value: object) -> str:
    """Escape ``& < > " '`` so the value is inert inside HTML markup.

    Not idempotent: ``&amp;`` becomes ``&amp;amp;``. Escape each value once.
    """

    return html.escape(str(value), quote=True)


def escape_text(value: object) -> str:
    """Escape a value placed between tags."""

    return escape_markup(value)


def escape_attribute(value: object) -> str:
    """Escape a value placed inside a double-quoted attribute."""

    return escape_markup(value)


__all__ = ["escape_attribute", "escape_markup", "escape_text"]

"""
Markup helpers for head/footer output.

Every value is escaped at render time: text for attribute context, URLs
through the URL escaper.
"""

from __future__ import annotations

import builtins
import json
from dataclasses import dataclass
from typing import Any

from src.domain.sanitize import escape_attr, escape_url


@dataclass(frozen=True)
class MetaTag:
    """HTML meta tag representation."""

    name: str | None = None
    property: str | None = None  # For OG tags
    content: str = ""
    is_url: bool = False

    # The field above shadows the builtin inside the class body
    @builtins.property
    def key(self) -> str:
        return self.property or self.name or ""


def render_meta_tag(tag: MetaTag) -> str:
    """Render one <meta> element followed by a newline."""
    content = escape_url(tag.content) if tag.is_url else escape_attr(tag.content)
    if tag.property:
        return f'<meta property="{escape_attr(tag.property)}" content="{content}" />\n'
    return f'<meta name="{escape_attr(tag.name)}" content="{content}" />\n'


def render_meta_tags(tags: list[MetaTag] | tuple[MetaTag, ...]) -> str:
    return "".join(render_meta_tag(tag) for tag in tags)


_SCRIPT_UNSAFE = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def encode_json_ld(data: dict[str, Any]) -> str:
    """
    Pretty-printed JSON with slashes left as-is.

    <, > and & become \\u escapes so values cannot close the script element.
    """
    encoded = json.dumps(data, indent=4)
    for char, escaped in _SCRIPT_UNSAFE.items():
        encoded = encoded.replace(char, escaped)
    return encoded


def render_json_ld(data: dict[str, Any]) -> str:
    """Wrap a structured data object in a single ld+json script element."""
    return f'<script type="application/ld+json">{encode_json_ld(data)}</script>\n'

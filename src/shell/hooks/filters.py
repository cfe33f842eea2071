"""
Filter hooks - extension points for resolved values.

External code registers callbacks against a hook name; the owning code
passes its value through every callback before using it.

Hooks used in this project:
- db_seo_schema_markup(schema, document_id): Article JSON-LD object
- db_seo_schema_markup_home(schema): WebSite JSON-LD object
- db_seo_meta_box_post_types(post_types): document types that get the meta box

Key behaviors:
- Callbacks run in ascending priority, then registration order
- Each callback receives the previous callback's return value
- A callback that raises aborts the chain (errors are not swallowed)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

SCHEMA_ARTICLE_HOOK = "db_seo_schema_markup"
SCHEMA_HOME_HOOK = "db_seo_schema_markup_home"
META_BOX_POST_TYPES_HOOK = "db_seo_meta_box_post_types"

DEFAULT_PRIORITY = 10


@dataclass(order=True)
class _Registration:
    priority: int
    sequence: int
    callback: Callable[..., Any] = field(compare=False)


class FilterRegistry:
    """Named filter hooks."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[_Registration]] = {}
        self._sequence = 0

    def add_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register callback on hook name."""
        self._sequence += 1
        registrations = self._hooks.setdefault(name, [])
        registrations.append(_Registration(priority, self._sequence, callback))
        registrations.sort()

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        """Unregister callback. Returns True if it was registered."""
        registrations = self._hooks.get(name, [])
        kept = [r for r in registrations if r.callback is not callback]
        self._hooks[name] = kept
        return len(kept) != len(registrations)

    def has_filters(self, name: str) -> bool:
        return bool(self._hooks.get(name))

    def apply_filters(self, name: str, value: T, *args: Any) -> T:
        """
        Pass value through every callback registered on name.

        Extra args are forwarded unchanged to each callback.
        """
        for registration in self._hooks.get(name, []):
            value = registration.callback(value, *args)
        if name in self._hooks:
            logger.debug("Applied %d filter(s) on %s", len(self._hooks[name]), name)
        return value


def create_filter_registry() -> FilterRegistry:
    return FilterRegistry()

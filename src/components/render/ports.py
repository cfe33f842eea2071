"""
Render component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import RenderContext


class ResolverPort(Protocol):
    """Anything that turns a render context into markup."""

    name: str

    def render(self, context: RenderContext) -> str:
        """Return markup for the context, "" when there is nothing to emit."""
        ...

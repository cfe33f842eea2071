"""
OG tags component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.services.markup import MetaTag
from src.domain.entities import RenderContext


@dataclass(frozen=True)
class OgTagsInput:
    """Input for rendering Open Graph tags."""

    context: RenderContext


@dataclass(frozen=True)
class OgTagsOutput:
    """
    Resolved Open Graph tags.

    tags is empty (and html "") when the resolver did not run.
    """

    tags: tuple[MetaTag, ...] = ()
    html: str = ""

    @property
    def emitted(self) -> bool:
        return bool(self.tags)

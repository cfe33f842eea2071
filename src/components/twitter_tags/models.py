"""
Twitter tags component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.services.markup import MetaTag
from src.domain.entities import RenderContext


@dataclass(frozen=True)
class TwitterTagsInput:
    """Input for rendering Twitter Card tags."""

    context: RenderContext


@dataclass(frozen=True)
class TwitterTagsOutput:
    """Resolved Twitter Card tags; empty when the resolver did not run."""

    tags: tuple[MetaTag, ...] = ()
    html: str = ""

    @property
    def emitted(self) -> bool:
        return bool(self.tags)

"""
Schema component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from src.domain.entities import RenderContext

SchemaVariant = Literal["Article", "WebSite"]


@dataclass(frozen=True)
class SchemaInput:
    """Input for rendering JSON-LD structured data."""

    context: RenderContext


@dataclass(frozen=True)
class SchemaOutput:
    """
    Structured data for the page.

    variant is None (and html "") when no structured data applies.
    """

    variant: SchemaVariant | None = None
    data: dict[str, Any] = field(default_factory=dict)
    html: str = ""

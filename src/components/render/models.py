"""
Render component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from src.domain.entities import RenderContext

RenderPoint = Literal["head", "footer"]


@dataclass(frozen=True)
class RenderInput:
    """Input for rendering one render point of a page."""

    point: RenderPoint
    context: RenderContext


@dataclass(frozen=True)
class RenderFragment:
    """Markup produced by one resolver ("" when it did not run)."""

    resolver: str
    html: str


@dataclass(frozen=True)
class RenderOutput:
    """Combined markup for a render point, in resolver order."""

    point: RenderPoint
    fragments: tuple[RenderFragment, ...] = ()

    @property
    def html(self) -> str:
        return "".join(f.html for f in self.fragments)

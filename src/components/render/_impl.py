"""
RenderOrchestrator - runs resolvers at the head and footer render points.

Resolvers are kept in explicit ordered lists instead of a hook registry,
so the output order is fixed and testable:
- head: Open Graph, then Twitter Card
- footer: Schema.org JSON-LD

Resolvers share no state and never write to the stores.
"""

from __future__ import annotations

from src.components.og_tags import OgTagsResolver
from src.components.schema import FiltersPort, SchemaResolver
from src.components.twitter_tags import TwitterTagsResolver
from src.core.ports.db import MetaReaderPort, OptionsReaderPort
from src.domain.entities import RenderContext

from .models import RenderFragment, RenderOutput, RenderPoint
from .ports import ResolverPort


class RenderOrchestrator:
    """Runs resolvers in a fixed order for each render point."""

    def __init__(
        self,
        head: list[ResolverPort] | None = None,
        footer: list[ResolverPort] | None = None,
    ) -> None:
        self._resolvers: dict[RenderPoint, list[ResolverPort]] = {
            "head": list(head or []),
            "footer": list(footer or []),
        }

    def resolvers(self, point: RenderPoint) -> list[ResolverPort]:
        return list(self._resolvers[point])

    def render_point(self, point: RenderPoint, context: RenderContext) -> RenderOutput:
        fragments = tuple(
            RenderFragment(resolver=r.name, html=r.render(context)) for r in self._resolvers[point]
        )
        return RenderOutput(point=point, fragments=fragments)

    def render_head(self, context: RenderContext) -> str:
        return self.render_point("head", context).html

    def render_footer(self, context: RenderContext) -> str:
        return self.render_point("footer", context).html


def create_render_orchestrator(
    options: OptionsReaderPort,
    meta: MetaReaderPort,
    filters: FiltersPort | None = None,
) -> RenderOrchestrator:
    """
    Create the standard orchestrator.

    Args:
        options: Global option store (read only)
        meta: Document metadata store (read only)
        filters: Optional filter hooks for the schema resolver

    Returns:
        RenderOrchestrator with OG + Twitter in the head and Schema in the footer
    """
    return RenderOrchestrator(
        head=[OgTagsResolver(options, meta), TwitterTagsResolver(options, meta)],
        footer=[SchemaResolver(options, meta, filters)],
    )

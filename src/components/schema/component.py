"""
Schema component - Schema.org JSON-LD for the page footer.

Invariants:
- I1: Nothing is emitted while schema_enabled is off
- I2: Singular documents get Article, a non-singular front page gets WebSite,
  every other page gets nothing
- I3: Filter hooks see the object before it is encoded
- I4: One <script type="application/ld+json"> element at most
"""

from __future__ import annotations

import logging

from src.components.post_meta import load_document_meta
from src.components.settings import settings_from_options
from src.core.services.markup import render_json_ld
from src.domain.entities import RenderContext
from src.shell.hooks.filters import SCHEMA_ARTICLE_HOOK, SCHEMA_HOME_HOOK

from ._impl import build_article_schema, build_website_schema
from .models import SchemaInput, SchemaOutput
from .ports import FiltersPort, MetaReaderPort, OptionsReaderPort

logger = logging.getLogger(__name__)


def run(
    inp: SchemaInput,
    *,
    options: OptionsReaderPort,
    meta: MetaReaderPort,
    filters: FiltersPort | None = None,
) -> SchemaOutput:
    """
    Resolve and render structured data.

    Args:
        inp: Input containing the render context.
        options: Global option store (read only).
        meta: Document metadata store (read only).
        filters: Optional filter hooks applied before encoding.

    Returns:
        SchemaOutput with the object and its script element.
    """
    ctx = inp.context
    settings = settings_from_options(options)
    if not settings.schema_enabled:
        logger.debug("Schema markup disabled")
        return SchemaOutput()

    if ctx.is_singular:
        data = build_article_schema(ctx, settings, load_document_meta(meta, ctx.document_id))
        if data is None:
            return SchemaOutput()
        if filters is not None:
            data = filters.apply_filters(SCHEMA_ARTICLE_HOOK, data, ctx.document_id)
        return SchemaOutput(variant="Article", data=data, html=render_json_ld(data))

    if ctx.is_front_page:
        data = build_website_schema(ctx)
        if filters is not None:
            data = filters.apply_filters(SCHEMA_HOME_HOOK, data)
        return SchemaOutput(variant="WebSite", data=data, html=render_json_ld(data))

    return SchemaOutput()


class SchemaResolver:
    """Footer resolver producing JSON-LD markup."""

    name = "schema"

    def __init__(
        self,
        options: OptionsReaderPort,
        meta: MetaReaderPort,
        filters: FiltersPort | None = None,
    ) -> None:
        self._options = options
        self._meta = meta
        self._filters = filters

    def render(self, context: RenderContext) -> str:
        return run(
            SchemaInput(context=context),
            options=self._options,
            meta=self._meta,
            filters=self._filters,
        ).html

"""
OG tags component - Open Graph meta tags for the page head.

Invariants:
- I1: No og:* tag is emitted while og_enabled is off
- I2: Only singular documents and the front page get tags
- I3: og:image is omitted, never empty
- I4: Never writes to the option or meta stores
"""

from __future__ import annotations

import logging

from src.components.post_meta import load_document_meta
from src.components.settings import settings_from_options
from src.core.services.markup import render_meta_tags
from src.domain.entities import RenderContext

from ._impl import build_og_tags
from .models import OgTagsInput, OgTagsOutput
from .ports import MetaReaderPort, OptionsReaderPort

logger = logging.getLogger(__name__)


def run(
    inp: OgTagsInput,
    *,
    options: OptionsReaderPort,
    meta: MetaReaderPort,
) -> OgTagsOutput:
    """
    Resolve and render Open Graph tags.

    Args:
        inp: Input containing the render context.
        options: Global option store (read only).
        meta: Document metadata store (read only).

    Returns:
        OgTagsOutput with tags and rendered markup.
    """
    ctx = inp.context
    settings = settings_from_options(options)
    document_meta = load_document_meta(meta, ctx.document_id)

    tags = build_og_tags(ctx, settings, document_meta)
    if not tags:
        logger.debug("OG tags skipped (enabled=%s)", settings.og_enabled)
        return OgTagsOutput()

    return OgTagsOutput(tags=tuple(tags), html=render_meta_tags(tags))


class OgTagsResolver:
    """Head resolver producing Open Graph markup."""

    name = "og_tags"

    def __init__(self, options: OptionsReaderPort, meta: MetaReaderPort) -> None:
        self._options = options
        self._meta = meta

    def render(self, context: RenderContext) -> str:
        return run(OgTagsInput(context=context), options=self._options, meta=self._meta).html

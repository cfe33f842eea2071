"""
Twitter tags component - Twitter Card meta tags for the page head.

Invariants:
- I1: Nothing is emitted while twitter_enabled is off
- I2: Only singular documents get tags (a listing front page gets none)
- I3: twitter:site always has a value
"""

from __future__ import annotations

import logging

from src.components.post_meta import load_document_meta
from src.components.settings import settings_from_options
from src.core.services.markup import render_meta_tags
from src.domain.entities import RenderContext

from ._impl import build_twitter_tags
from .models import TwitterTagsInput, TwitterTagsOutput
from .ports import MetaReaderPort, OptionsReaderPort

logger = logging.getLogger(__name__)


def run(
    inp: TwitterTagsInput,
    *,
    options: OptionsReaderPort,
    meta: MetaReaderPort,
) -> TwitterTagsOutput:
    """Resolve and render Twitter Card tags."""
    ctx = inp.context
    settings = settings_from_options(options)
    document_meta = load_document_meta(meta, ctx.document_id)

    tags = build_twitter_tags(ctx, settings, document_meta)
    if not tags:
        logger.debug("Twitter tags skipped (enabled=%s)", settings.twitter_enabled)
        return TwitterTagsOutput()

    return TwitterTagsOutput(tags=tuple(tags), html=render_meta_tags(tags))


class TwitterTagsResolver:
    """Head resolver producing Twitter Card markup."""

    name = "twitter_tags"

    def __init__(self, options: OptionsReaderPort, meta: MetaReaderPort) -> None:
        self._options = options
        self._meta = meta

    def render(self, context: RenderContext) -> str:
        return run(TwitterTagsInput(context=context), options=self._options, meta=self._meta).html

"""
Twitter Card tag resolution.

Uses the same cascade as the Open Graph tags but only runs on singular
documents. The card type is always summary_large_image.
"""

from __future__ import annotations

from src.core.services.cascade import (
    canonical_url,
    first_non_empty,
    resolve_description,
    resolve_image,
    resolve_title,
)
from src.core.services.markup import MetaTag
from src.domain.entities import DocumentMeta, RenderContext, SeoSettings

CARD_TYPE = "summary_large_image"
PLACEHOLDER_HANDLE = "@default_handle"


def build_twitter_tags(
    ctx: RenderContext,
    settings: SeoSettings,
    meta: DocumentMeta,
) -> list[MetaTag]:
    """
    Build Twitter Card tags for the current page.

    Order: card, title, description, url, site, then image when resolved.
    """
    if not settings.twitter_enabled or not ctx.is_singular:
        return []

    tags = [
        MetaTag(name="twitter:card", content=CARD_TYPE),
        MetaTag(name="twitter:title", content=resolve_title(ctx, meta)),
        MetaTag(name="twitter:description", content=resolve_description(ctx, settings, meta)),
        MetaTag(name="twitter:url", content=canonical_url(ctx), is_url=True),
        MetaTag(
            name="twitter:site",
            content=first_non_empty(settings.twitter_handle, PLACEHOLDER_HANDLE),
        ),
    ]

    image = resolve_image(ctx, settings, meta)
    if image:
        tags.append(MetaTag(name="twitter:image", content=image, is_url=True))

    return tags

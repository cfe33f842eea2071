"""
Open Graph tag resolution.

Pure function: same context, settings and metadata always produce the
same tags.

Tag order: og:title, og:type, og:url, og:site_name, og:description,
then og:image only when an image resolved.
"""

from __future__ import annotations

from src.core.services.cascade import (
    canonical_url,
    is_taggable,
    resolve_description,
    resolve_image,
    resolve_og_type,
    resolve_title,
)
from src.core.services.markup import MetaTag
from src.domain.entities import DocumentMeta, RenderContext, SeoSettings


def build_og_tags(
    ctx: RenderContext,
    settings: SeoSettings,
    meta: DocumentMeta,
) -> list[MetaTag]:
    """
    Build Open Graph tags for the current page.

    Returns an empty list when OG output is disabled or the page is neither
    a singular document nor the front page.
    """
    if not settings.og_enabled or not is_taggable(ctx):
        return []

    tags = [
        MetaTag(property="og:title", content=resolve_title(ctx, meta)),
        MetaTag(property="og:type", content=resolve_og_type(ctx, meta)),
        MetaTag(property="og:url", content=canonical_url(ctx), is_url=True),
        MetaTag(property="og:site_name", content=ctx.site.name),
        MetaTag(property="og:description", content=resolve_description(ctx, settings, meta)),
    ]

    image = resolve_image(ctx, settings, meta)
    if image:
        tags.append(MetaTag(property="og:image", content=image, is_url=True))

    return tags

"""
Schema.org JSON-LD builders.

Two mutually exclusive variants:
- Article for singular documents
- WebSite for the front page when it is not itself a singular document

The Article description prefers the excerpt over the configured default
description; the head tags prefer the default. Both orders are kept.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from src.core.services.cascade import (
    featured_image,
    first_non_empty,
    force_https,
    host_excerpt,
    resolve_title,
)
from src.domain.entities import DocumentMeta, RenderContext, SeoSettings

SCHEMA_CONTEXT = "https://schema.org"
SEARCH_PLACEHOLDER = "{search_term_string}"
SEARCH_QUERY_INPUT = "required name=search_term_string"

# Transparent 1x1 PNG, used when neither a site logo nor a default image exists
PLACEHOLDER_LOGO = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


def iso8601(value: datetime) -> str:
    """ISO-8601 with explicit offset; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.isoformat(timespec="seconds")


def resolve_logo(ctx: RenderContext, settings: SeoSettings) -> str:
    """Site logo > default image > transparent pixel."""
    logo = first_non_empty(ctx.site.logo_url, settings.default_image_url)
    return force_https(logo) if logo else PLACEHOLDER_LOGO


def resolve_article_description(
    ctx: RenderContext,
    settings: SeoSettings,
    meta: DocumentMeta,
) -> str:
    """Custom > excerpt > default description > site description."""
    return first_non_empty(
        meta.custom_description,
        lambda: host_excerpt(ctx),
        settings.default_meta_description,
        ctx.site.description,
    )


def resolve_article_image(
    ctx: RenderContext,
    settings: SeoSettings,
    meta: DocumentMeta,
) -> str:
    """Custom > featured > default image > "" (the field is always present)."""
    image = first_non_empty(
        meta.custom_image_url,
        lambda: featured_image(ctx),
        settings.default_image_url,
    )
    return force_https(image) if image else ""


def search_target(home_url: str) -> str:
    return f"{home_url.rstrip('/')}/?s={SEARCH_PLACEHOLDER}"


def build_article_schema(
    ctx: RenderContext,
    settings: SeoSettings,
    meta: DocumentMeta,
) -> dict[str, Any] | None:
    """Article object for a singular document, None without a document."""
    document = ctx.document
    if document is None:
        return None

    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Article",
        "headline": resolve_title(ctx, meta),
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": document.permalink,
        },
        "datePublished": iso8601(document.published_at),
        "dateModified": iso8601(document.modified_at),
        "author": {
            "@type": "Person",
            "name": document.author_name,
        },
        "publisher": {
            "@type": "Organization",
            "name": ctx.site.name,
            "logo": {
                "@type": "ImageObject",
                "url": resolve_logo(ctx, settings),
            },
        },
        "description": resolve_article_description(ctx, settings, meta),
        "image": resolve_article_image(ctx, settings, meta),
    }


def build_website_schema(ctx: RenderContext) -> dict[str, Any]:
    """WebSite object with a sitelinks search box action."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebSite",
        "name": ctx.site.name,
        "alternateName": ctx.document_title,
        "url": ctx.site.home_url,
        "potentialAction": {
            "@type": "SearchAction",
            "target": search_target(ctx.site.home_url),
            "query-input": SEARCH_QUERY_INPUT,
        },
    }

"""
Value resolution cascade shared by the tag and schema resolvers.

Each field is resolved from an ordered list of candidate sources; the
first non-empty candidate wins. Candidates may be plain values or
zero-argument callables, callables are only invoked once every earlier
candidate turned out empty. Empty string and None are the same thing.

Resolution order (tags):
- title: custom title > host title
- description: custom > default description > site description > excerpt
- image: custom > featured > default image > none
- og_type: custom > "website" on the front page, "article" elsewhere
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Union

from src.domain.entities import DocumentMeta, RenderContext, SeoSettings

Candidate = Union[str, None, Callable[[], "str | None"]]


def first_non_empty(*candidates: Candidate) -> str:
    """
    Return the first candidate that yields a non-empty string.

    Returns "" when every candidate is empty.
    """
    for candidate in candidates:
        value = candidate() if callable(candidate) else candidate
        if value:
            return value
    return ""


def force_https(url: str) -> str:
    """Rewrite an http:// scheme to https://, leave anything else untouched."""
    if url.startswith("http://"):
        return "https://" + url[len("http://") :]
    return url


# --- Host-provided values ---


def host_title(ctx: RenderContext) -> str:
    """Title the host would print for the current document."""
    if ctx.document is not None:
        return ctx.document.title
    return ctx.document_title


def host_excerpt(ctx: RenderContext) -> str:
    return ctx.document.excerpt if ctx.document is not None else ""


def featured_image(ctx: RenderContext) -> str | None:
    return ctx.document.featured_image_url if ctx.document is not None else None


def canonical_url(ctx: RenderContext) -> str:
    """Permalink of the current document, the home URL when there is none."""
    if ctx.document is not None:
        return ctx.document.permalink
    return ctx.site.home_url


def is_taggable(ctx: RenderContext) -> bool:
    """Tags are only emitted on singular documents and the front page."""
    return ctx.is_singular or ctx.is_front_page


# --- Field resolution ---


def resolve_title(ctx: RenderContext, meta: DocumentMeta) -> str:
    return first_non_empty(meta.custom_title, lambda: host_title(ctx))


def resolve_description(ctx: RenderContext, settings: SeoSettings, meta: DocumentMeta) -> str:
    return first_non_empty(
        meta.custom_description,
        settings.default_meta_description,
        ctx.site.description,
        lambda: host_excerpt(ctx),
    )


def resolve_image(ctx: RenderContext, settings: SeoSettings, meta: DocumentMeta) -> str:
    """Resolve the share image, normalized to https. "" when nothing is set."""
    image = first_non_empty(
        meta.custom_image_url,
        lambda: featured_image(ctx),
        settings.default_image_url,
    )
    return force_https(image) if image else ""


def resolve_og_type(ctx: RenderContext, meta: DocumentMeta) -> str:
    return first_non_empty(meta.og_type, "website" if ctx.is_front_page else "article")

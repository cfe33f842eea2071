"""
Schema component unit tests.

Covers the Article / WebSite variants, the description and image
fallbacks, filter hooks and the encoded script element.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta, timezone
from typing import Any

import pytest

from src.components.schema import (
    PLACEHOLDER_LOGO,
    SchemaInput,
    SchemaResolver,
    build_article_schema,
    build_website_schema,
    resolve_logo,
    run,
)
from src.components.schema._impl import iso8601, search_target
from src.domain.entities import (
    META_CUSTOM_DESCRIPTION,
    META_CUSTOM_IMAGE,
    OPTION_DEFAULT_IMAGE,
    OPTION_DEFAULT_META_DESCRIPTION,
    OPTION_SCHEMA_ENABLED,
    Document,
    DocumentMeta,
    RenderContext,
    SeoSettings,
    SiteInfo,
)
from src.shell.hooks.filters import SCHEMA_ARTICLE_HOOK, SCHEMA_HOME_HOOK, FilterRegistry


class MockOptions:
    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values = dict(values or {})

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


class MockMeta:
    def __init__(self, values: dict[tuple[int, str], str] | None = None) -> None:
        self.values = dict(values or {})

    def get_meta(self, document_id: int, key: str) -> str | None:
        return self.values.get((document_id, key))


@pytest.fixture
def site() -> SiteInfo:
    return SiteInfo(
        name="Example Blog",
        description="Just another site",
        home_url="https://example.com/",
    )


@pytest.fixture
def document() -> Document:
    return Document(
        id=3,
        slug="launch",
        title="Launch Day",
        excerpt="We launched",
        permalink="https://example.com/launch/",
        author_name="Sam Writer",
        published_at=datetime(2024, 1, 2, 3, 4, 5),
        modified_at=datetime(2024, 2, 3, 4, 5, 6),
    )


@pytest.fixture
def singular(site: SiteInfo, document: Document) -> RenderContext:
    return RenderContext(site=site, document=document, is_singular=True)


@pytest.fixture
def front_page(site: SiteInfo) -> RenderContext:
    return RenderContext(
        site=site, is_front_page=True, document_title="Example Blog - Just another site"
    )


def run_schema(ctx: RenderContext, options: dict[str, Any] | None = None, **kwargs: Any) -> Any:
    return run(
        SchemaInput(context=ctx),
        options=MockOptions(options),
        meta=kwargs.pop("meta", MockMeta()),
        **kwargs,
    )


class TestArticleSchema:
    def test_article_structure(self, singular: RenderContext) -> None:
        out = run_schema(singular)

        assert out.variant == "Article"
        assert out.data == {
            "@context": "https://schema.org",
            "@type": "Article",
            "headline": "Launch Day",
            "mainEntityOfPage": {"@type": "WebPage", "@id": "https://example.com/launch/"},
            "datePublished": "2024-01-02T03:04:05+00:00",
            "dateModified": "2024-02-03T04:05:06+00:00",
            "author": {"@type": "Person", "name": "Sam Writer"},
            "publisher": {
                "@type": "Organization",
                "name": "Example Blog",
                "logo": {"@type": "ImageObject", "url": PLACEHOLDER_LOGO},
            },
            "description": "We launched",
            "image": "",
        }

    def test_image_empty_string_when_nothing_resolves(self, singular: RenderContext) -> None:
        out = run_schema(singular)

        assert "image" in out.data
        assert out.data["image"] == ""

    def test_excerpt_beats_default_description(self, singular: RenderContext) -> None:
        out = run_schema(singular, {OPTION_DEFAULT_META_DESCRIPTION: "Default description"})

        assert out.data["description"] == "We launched"

    def test_default_description_when_no_excerpt(
        self, site: SiteInfo, document: Document
    ) -> None:
        ctx = RenderContext(
            site=site, document=document.model_copy(update={"excerpt": ""}), is_singular=True
        )

        out = run_schema(ctx, {OPTION_DEFAULT_META_DESCRIPTION: "Default description"})

        assert out.data["description"] == "Default description"

    def test_site_description_last(self, site: SiteInfo, document: Document) -> None:
        ctx = RenderContext(
            site=site, document=document.model_copy(update={"excerpt": ""}), is_singular=True
        )

        assert run_schema(ctx).data["description"] == "Just another site"

    def test_custom_description_first(self, singular: RenderContext) -> None:
        meta = MockMeta({(3, META_CUSTOM_DESCRIPTION): "Custom"})

        assert run_schema(singular, meta=meta).data["description"] == "Custom"

    def test_image_https_normalized(self, singular: RenderContext) -> None:
        meta = MockMeta({(3, META_CUSTOM_IMAGE): "http://example.com/a.png"})

        assert run_schema(singular, meta=meta).data["image"] == "https://example.com/a.png"

    def test_logo_falls_back_to_default_image(self, singular: RenderContext) -> None:
        out = run_schema(singular, {OPTION_DEFAULT_IMAGE: "http://example.com/default.png"})

        assert out.data["publisher"]["logo"]["url"] == "https://example.com/default.png"
        assert out.data["image"] == "https://example.com/default.png"

    def test_site_logo_preferred(self, site: SiteInfo, document: Document) -> None:
        ctx = RenderContext(
            site=site.model_copy(update={"logo_url": "https://example.com/logo.png"}),
            document=document,
            is_singular=True,
        )
        settings = SeoSettings(default_image_url="https://example.com/default.png")

        assert resolve_logo(ctx, settings) == "https://example.com/logo.png"

    def test_article_without_document(self, site: SiteInfo) -> None:
        ctx = RenderContext(site=site, is_singular=True)

        assert build_article_schema(ctx, SeoSettings(), DocumentMeta()) is None
        assert run_schema(ctx).html == ""


class TestWebsiteSchema:
    def test_front_page_gets_website(self, front_page: RenderContext) -> None:
        out = run_schema(front_page)

        assert out.variant == "WebSite"
        assert out.data == {
            "@context": "https://schema.org",
            "@type": "WebSite",
            "name": "Example Blog",
            "alternateName": "Example Blog - Just another site",
            "url": "https://example.com/",
            "potentialAction": {
                "@type": "SearchAction",
                "target": "https://example.com/?s={search_term_string}",
                "query-input": "required name=search_term_string",
            },
        }

    def test_singular_front_page_gets_article(self, singular: RenderContext) -> None:
        ctx = singular.model_copy(update={"is_front_page": True})

        assert run_schema(ctx).variant == "Article"

    def test_archive_gets_nothing(self, site: SiteInfo) -> None:
        out = run_schema(RenderContext(site=site))

        assert out.variant is None
        assert out.html == ""

    def test_search_target_without_trailing_slash(self) -> None:
        assert search_target("https://example.com") == "https://example.com/?s={search_term_string}"

    def test_builder_is_pure(self, front_page: RenderContext) -> None:
        assert build_website_schema(front_page) == build_website_schema(front_page)


class TestSchemaMarkup:
    def test_single_script_element(self, singular: RenderContext) -> None:
        html = run_schema(singular).html

        assert html.startswith('<script type="application/ld+json">')
        assert html.endswith("</script>\n")
        assert html.count("<script") == 1

    def test_json_round_trips(self, singular: RenderContext) -> None:
        out = run_schema(singular)
        body = out.html[len('<script type="application/ld+json">') : -len("</script>\n")]

        assert json.loads(body) == out.data

    def test_slashes_not_escaped(self, singular: RenderContext) -> None:
        assert "https://schema.org" in run_schema(singular).html

    def test_pretty_printed(self, singular: RenderContext) -> None:
        assert '\n    "@type": "Article"' in run_schema(singular).html

    def test_script_close_in_values_is_escaped(self, site: SiteInfo, document: Document) -> None:
        hostile = document.model_copy(
            update={"excerpt": "</script><script>alert(1)</script>", "author_name": "A & B"}
        )
        out = run_schema(RenderContext(site=site, document=hostile, is_singular=True))

        assert out.html.count("</script>") == 1
        assert "\\u003c/script\\u003e" in out.html
        body = out.html[len('<script type="application/ld+json">') : -len("</script>\n")]
        assert json.loads(body)["description"] == "</script><script>alert(1)</script>"
        assert json.loads(body)["author"]["name"] == "A & B"

    def test_disabled(self, singular: RenderContext, front_page: RenderContext) -> None:
        assert run_schema(singular, {OPTION_SCHEMA_ENABLED: ""}).html == ""
        assert run_schema(front_page, {OPTION_SCHEMA_ENABLED: ""}).html == ""


class TestSchemaFilters:
    def test_article_filter_receives_document_id(self, singular: RenderContext) -> None:
        registry = FilterRegistry()
        seen: list[int] = []

        def add_keywords(data: dict[str, Any], document_id: int) -> dict[str, Any]:
            seen.append(document_id)
            return {**data, "keywords": "launch"}

        registry.add_filter(SCHEMA_ARTICLE_HOOK, add_keywords)

        out = run_schema(singular, filters=registry)

        assert seen == [3]
        assert out.data["keywords"] == "launch"
        assert '"keywords": "launch"' in out.html

    def test_home_filter(self, front_page: RenderContext) -> None:
        registry = FilterRegistry()
        registry.add_filter(SCHEMA_HOME_HOOK, lambda data: {**data, "name": "Renamed"})

        assert run_schema(front_page, filters=registry).data["name"] == "Renamed"

    def test_home_filter_not_applied_to_article(self, singular: RenderContext) -> None:
        registry = FilterRegistry()
        registry.add_filter(SCHEMA_HOME_HOOK, lambda data: {**data, "name": "Renamed"})

        assert "name" not in run_schema(singular, filters=registry).data

    def test_failing_filter_propagates(self, singular: RenderContext) -> None:
        registry = FilterRegistry()

        def broken(data: dict[str, Any], document_id: int) -> dict[str, Any]:
            raise RuntimeError("boom")

        registry.add_filter(SCHEMA_ARTICLE_HOOK, broken)

        with pytest.raises(RuntimeError, match="boom"):
            run_schema(singular, filters=registry)


class TestIso8601:
    def test_naive_is_utc(self) -> None:
        assert iso8601(datetime(2024, 5, 6, 7, 8, 9)) == "2024-05-06T07:08:09+00:00"

    def test_aware_keeps_offset(self) -> None:
        tz = timezone(timedelta(hours=2))
        assert iso8601(datetime(2024, 5, 6, 7, 8, 9, tzinfo=tz)) == "2024-05-06T07:08:09+02:00"

    def test_drops_microseconds(self) -> None:
        assert iso8601(datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=UTC)).endswith("09+00:00")


class TestSchemaResolver:
    def test_render(self, front_page: RenderContext) -> None:
        resolver = SchemaResolver(MockOptions(), MockMeta())

        assert resolver.name == "schema"
        assert '"@type": "WebSite"' in resolver.render(front_page)

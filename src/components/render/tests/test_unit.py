"""
Render component unit tests.
"""

from __future__ import annotations

from typing import Any

import pytest

from src.components.render import (
    RenderInput,
    RenderOrchestrator,
    create_render_orchestrator,
    run,
)
from src.domain.entities import (
    META_CUSTOM_TITLE,
    OPTION_OG_ENABLED,
    OPTION_SCHEMA_ENABLED,
    OPTION_TWITTER_ENABLED,
    Document,
    RenderContext,
    SiteInfo,
)
from src.shell.hooks.filters import SCHEMA_HOME_HOOK, FilterRegistry


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


class StaticResolver:
    def __init__(self, name: str, html: str) -> None:
        self.name = name
        self.html = html
        self.contexts: list[RenderContext] = []

    def render(self, context: RenderContext) -> str:
        self.contexts.append(context)
        return self.html


@pytest.fixture
def site() -> SiteInfo:
    return SiteInfo(name="Example Blog", home_url="https://example.com/")


@pytest.fixture
def singular(site: SiteInfo) -> RenderContext:
    document = Document(
        id=1, slug="one", title="One", excerpt="First", permalink="https://example.com/one/"
    )
    return RenderContext(site=site, document=document, is_singular=True)


class TestRenderOrchestrator:
    def test_fragments_follow_resolver_order(self, singular: RenderContext) -> None:
        orchestrator = RenderOrchestrator(
            head=[StaticResolver("b", "<b/>\n"), StaticResolver("a", "<a/>\n")],
        )

        out = orchestrator.render_point("head", singular)

        assert [f.resolver for f in out.fragments] == ["b", "a"]
        assert out.html == "<b/>\n<a/>\n"

    def test_points_are_separate(self, singular: RenderContext) -> None:
        head = StaticResolver("head", "H")
        footer = StaticResolver("footer", "F")
        orchestrator = RenderOrchestrator(head=[head], footer=[footer])

        assert orchestrator.render_head(singular) == "H"
        assert orchestrator.render_footer(singular) == "F"
        assert len(head.contexts) == 1
        assert len(footer.contexts) == 1

    def test_empty_point(self, singular: RenderContext) -> None:
        assert RenderOrchestrator().render_footer(singular) == ""

    def test_run_entry_point(self, singular: RenderContext) -> None:
        orchestrator = RenderOrchestrator(footer=[StaticResolver("x", "X")])

        out = run(RenderInput(point="footer", context=singular), orchestrator=orchestrator)

        assert out.point == "footer"
        assert out.html == "X"


class TestStandardOrchestrator:
    def test_standard_resolver_lists(self) -> None:
        orchestrator = create_render_orchestrator(MockOptions(), MockMeta())

        assert [r.name for r in orchestrator.resolvers("head")] == ["og_tags", "twitter_tags"]
        assert [r.name for r in orchestrator.resolvers("footer")] == ["schema"]

    def test_head_has_og_before_twitter(self, singular: RenderContext) -> None:
        head = create_render_orchestrator(MockOptions(), MockMeta()).render_head(singular)

        assert head.index('property="og:title"') < head.index('name="twitter:card"')
        assert "application/ld+json" not in head

    def test_footer_has_schema_only(self, singular: RenderContext) -> None:
        footer = create_render_orchestrator(MockOptions(), MockMeta()).render_footer(singular)

        assert footer.startswith('<script type="application/ld+json">')
        assert "<meta" not in footer

    def test_custom_title_reaches_every_resolver(self, singular: RenderContext) -> None:
        orchestrator = create_render_orchestrator(
            MockOptions(), MockMeta({(1, META_CUSTOM_TITLE): "Shared Title"})
        )

        head = orchestrator.render_head(singular)
        footer = orchestrator.render_footer(singular)

        assert 'property="og:title" content="Shared Title"' in head
        assert 'name="twitter:title" content="Shared Title"' in head
        assert '"headline": "Shared Title"' in footer

    def test_all_disabled(self, singular: RenderContext) -> None:
        options = MockOptions(
            {OPTION_OG_ENABLED: "", OPTION_TWITTER_ENABLED: "", OPTION_SCHEMA_ENABLED: ""}
        )
        orchestrator = create_render_orchestrator(options, MockMeta())

        assert orchestrator.render_head(singular) == ""
        assert orchestrator.render_footer(singular) == ""

    def test_filters_passed_to_schema(self, site: SiteInfo) -> None:
        registry = FilterRegistry()
        registry.add_filter(SCHEMA_HOME_HOOK, lambda data: {**data, "inLanguage": "en"})
        orchestrator = create_render_orchestrator(MockOptions(), MockMeta(), registry)
        ctx = RenderContext(site=site, is_front_page=True, document_title="Example Blog")

        assert '"inLanguage": "en"' in orchestrator.render_footer(ctx)

"""
Public SSR Routes - server-side rendered pages with SEO markup.

Serves minimal HTML pages for crawlers and social previews. The head
carries the Open Graph and Twitter Card tags, the footer the JSON-LD
structured data, both produced by the render orchestrator.
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from src.adapters.sqlite.repos import SQLiteDocumentRepo
from src.api.deps import get_document_repo, get_render_orchestrator, get_site_info
from src.components.render import RenderOrchestrator
from src.domain.entities import Document, RenderContext, SiteInfo
from src.domain.sanitize import escape_attr

router = APIRouter()

TITLE_SEPARATOR = " - "


# --- HTML Rendering ---


def front_page_title(site: SiteInfo) -> str:
    if site.description:
        return f"{site.name}{TITLE_SEPARATOR}{site.description}"
    return site.name


def document_page_title(document: Document, site: SiteInfo) -> str:
    return f"{document.title}{TITLE_SEPARATOR}{site.name}"


def render_ssr_page(
    context: RenderContext,
    orchestrator: RenderOrchestrator,
    body_content: str = "",
) -> str:
    """
    Render complete SSR HTML page.

    Head and footer fragments come from the orchestrator, in its fixed order.
    """
    head = orchestrator.render_head(context)
    footer = orchestrator.render_footer(context)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8" />
<meta name="viewport" content="width=device-width, initial-scale=1.0" />
<title>{escape_attr(context.document_title)}</title>
{head}</head>
<body>
{body_content}
{footer}</body>
</html>"""


# --- SSR Endpoints ---


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Homepage SSR",
    description="Server-side rendered front page with SEO markup.",
)
def ssr_homepage(
    site: SiteInfo = Depends(get_site_info),
    orchestrator: RenderOrchestrator = Depends(get_render_orchestrator),
) -> HTMLResponse:
    context = RenderContext(
        site=site,
        is_front_page=True,
        document_title=front_page_title(site),
    )

    body = f"""<main>
<h1>{escape_attr(site.name)}</h1>
<p>{escape_attr(site.description)}</p>
</main>"""

    return HTMLResponse(content=render_ssr_page(context, orchestrator, body), status_code=200)


@router.get(
    "/p/{slug}",
    response_class=HTMLResponse,
    summary="Document SSR",
    description="Server-side rendered post or page with SEO markup.",
)
def ssr_document(
    slug: str,
    site: SiteInfo = Depends(get_site_info),
    orchestrator: RenderOrchestrator = Depends(get_render_orchestrator),
    documents: SQLiteDocumentRepo = Depends(get_document_repo),
) -> HTMLResponse:
    document = documents.get_by_slug(slug)
    if document is None:
        raise HTTPException(status_code=404, detail="Document not found")

    context = RenderContext(
        site=site,
        document=document,
        is_singular=True,
        document_title=document_page_title(document, site),
    )

    body = f"""<article>
<h1>{escape_attr(document.title)}</h1>
<p>{escape_attr(document.excerpt)}</p>
</article>"""

    return HTMLResponse(content=render_ssr_page(context, orchestrator, body), status_code=200)

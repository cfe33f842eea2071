import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_settings
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        load_rules(settings.rules_path)
        logger.info("Rules loaded from %s", settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="DB SEO API",
    version="1.1.1",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import (  # noqa: E402
    admin_post_meta,
    admin_seo_settings,
    public_ssr,
)

app.include_router(
    admin_seo_settings.router, prefix="/api/admin/seo/settings", tags=["Admin SEO Settings"]
)
app.include_router(admin_post_meta.router, prefix="/api/admin/seo/posts", tags=["Admin SEO Posts"])
app.include_router(public_ssr.router, prefix="", tags=["SSR"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "db-seo"}

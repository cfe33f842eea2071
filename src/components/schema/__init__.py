"""
Schema component - Schema.org JSON-LD structured data.
"""

from ._impl import (
    PLACEHOLDER_LOGO,
    build_article_schema,
    build_website_schema,
    resolve_article_description,
    resolve_article_image,
    resolve_logo,
)
from .component import SchemaResolver, run
from .models import SchemaInput, SchemaOutput
from .ports import FiltersPort

__all__ = [
    "run",
    "build_article_schema",
    "build_website_schema",
    "resolve_article_description",
    "resolve_article_image",
    "resolve_logo",
    "PLACEHOLDER_LOGO",
    "SchemaInput",
    "SchemaOutput",
    "SchemaResolver",
    "FiltersPort",
]

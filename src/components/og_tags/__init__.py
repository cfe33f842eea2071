"""
OG tags component - Open Graph meta tags.
"""

from ._impl import build_og_tags
from .component import OgTagsResolver, run
from .models import OgTagsInput, OgTagsOutput

__all__ = [
    "run",
    "build_og_tags",
    "OgTagsInput",
    "OgTagsOutput",
    "OgTagsResolver",
]

"""
Twitter tags component - Twitter Card meta tags.
"""

from ._impl import CARD_TYPE, PLACEHOLDER_HANDLE, build_twitter_tags
from .component import TwitterTagsResolver, run
from .models import TwitterTagsInput, TwitterTagsOutput

__all__ = [
    "run",
    "build_twitter_tags",
    "CARD_TYPE",
    "PLACEHOLDER_HANDLE",
    "TwitterTagsInput",
    "TwitterTagsOutput",
    "TwitterTagsResolver",
]

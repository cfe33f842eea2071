"""
Render component - orchestrates SEO resolvers at page render points.
"""

from ._impl import RenderOrchestrator, create_render_orchestrator
from .component import run
from .models import RenderFragment, RenderInput, RenderOutput, RenderPoint
from .ports import ResolverPort

__all__ = [
    "run",
    "RenderInput",
    "RenderOutput",
    "RenderFragment",
    "RenderPoint",
    "RenderOrchestrator",
    "ResolverPort",
    "create_render_orchestrator",
]

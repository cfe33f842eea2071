"""
Render component - head/footer SEO markup for a page.

Invariants:
- I1: Output order follows resolver order, never registration timing
- I2: A resolver that has nothing to emit contributes ""
"""

from __future__ import annotations

from ._impl import RenderOrchestrator
from .models import RenderInput, RenderOutput


def run(
    inp: RenderInput,
    *,
    orchestrator: RenderOrchestrator,
) -> RenderOutput:
    """
    Render one render point.

    Args:
        inp: Render point plus page context.
        orchestrator: Configured orchestrator.

    Returns:
        RenderOutput with one fragment per resolver.
    """
    return orchestrator.render_point(inp.point, inp.context)

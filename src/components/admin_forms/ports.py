"""
Admin forms component port definitions.
"""

from __future__ import annotations

from src.components.schema.ports import FiltersPort

__all__ = ["FiltersPort"]

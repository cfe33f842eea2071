"""
OG tags component port definitions.
"""

from __future__ import annotations

from src.core.ports.db import MetaReaderPort, OptionsReaderPort

__all__ = ["MetaReaderPort", "OptionsReaderPort"]

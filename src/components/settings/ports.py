"""
Settings component port definitions.
"""

from __future__ import annotations

from src.core.ports.db import OptionsReaderPort, OptionsRepoPort

__all__ = ["OptionsReaderPort", "OptionsRepoPort"]

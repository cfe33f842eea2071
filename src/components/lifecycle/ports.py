"""
Lifecycle component port definitions.
"""

from __future__ import annotations

from src.core.ports.db import MetaRepoPort, OptionsRepoPort

__all__ = ["MetaRepoPort", "OptionsRepoPort"]

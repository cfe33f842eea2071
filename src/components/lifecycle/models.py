"""
Lifecycle component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ActivateInput:
    pass


@dataclass(frozen=True)
class ActivateOutput:
    """added lists the option keys that did not exist before activation."""

    added: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UninstallInput:
    pass


@dataclass(frozen=True)
class UninstallOutput:
    options_deleted: int = 0
    meta_deleted: int = 0

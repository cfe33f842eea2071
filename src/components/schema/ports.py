"""
Schema component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from src.core.ports.db import MetaReaderPort, OptionsReaderPort

T = TypeVar("T")


class FiltersPort(Protocol):
    """Extension hooks applied to the structured data before encoding."""

    def apply_filters(self, name: str, value: T, *args: Any) -> T: ...

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = 10) -> None: ...


__all__ = ["FiltersPort", "MetaReaderPort", "OptionsReaderPort"]

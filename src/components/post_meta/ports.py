"""
Post meta component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.core.ports.db import MetaReaderPort, MetaRepoPort
from src.domain.entities import User


class NonceVerifierPort(Protocol):
    """Checks authenticity tokens issued with the meta box form."""

    def verify_nonce(self, token: str, action: str, user: User) -> bool:
        """True if token was issued for this action and user and has not expired."""
        ...


class PermissionPort(Protocol):
    """Capability checks for the acting user."""

    def can(self, user: User, capability: str, document_id: int | None = None) -> bool:
        ...


__all__ = ["MetaReaderPort", "MetaRepoPort", "NonceVerifierPort", "PermissionPort"]

"""
Storage interfaces for settings, document metadata and documents.

Protocol-based interfaces for repository operations.
Implementations: SQLite (src.adapters.sqlite.repos), in-memory fakes in tests.

Invariants:
- I1: Option reads always succeed; a missing key yields the caller's default
- I2: Meta reads never fail; a missing key yields None
- I3: Render paths only ever call the read methods
"""

from __future__ import annotations

from typing import Any, Protocol
from uuid import UUID

from src.domain.entities import Document, User

# -----------------------------------------------------------------------------
# Global options (key/value)
# -----------------------------------------------------------------------------


class OptionsReaderPort(Protocol):
    """Read-only view of the global option store."""

    def get_option(self, key: str, default: Any = None) -> Any:
        """Return the stored value for key, or default when the key is absent."""
        ...


class OptionsRepoPort(OptionsReaderPort, Protocol):
    """Read/write option store."""

    def add_option(self, key: str, value: Any) -> bool:
        """Store value only if key is absent. Returns True if stored."""
        ...

    def update_option(self, key: str, value: Any) -> None:
        """Create or replace key."""
        ...

    def delete_option(self, key: str) -> bool:
        """Remove key. Returns True if a row was deleted."""
        ...


# -----------------------------------------------------------------------------
# Per-document metadata
# -----------------------------------------------------------------------------


class MetaReaderPort(Protocol):
    """Read-only view of per-document metadata."""

    def get_meta(self, document_id: int, key: str) -> str | None:
        """Return the single value stored under key for a document."""
        ...


class MetaRepoPort(MetaReaderPort, Protocol):
    """Read/write per-document metadata."""

    def update_meta(self, document_id: int, key: str, value: str) -> None:
        """Create or replace the value stored under key for a document."""
        ...

    def delete_by_prefix(self, prefix: str) -> int:
        """Delete every row (any document) whose key starts with prefix."""
        ...


# -----------------------------------------------------------------------------
# Host documents and users
# -----------------------------------------------------------------------------


class DocumentRepoPort(Protocol):
    """Documents owned by the host platform."""

    def get_by_id(self, document_id: int) -> Document | None: ...

    def get_by_slug(self, slug: str) -> Document | None: ...

    def save(self, document: Document) -> Document: ...


class UserRepoPort(Protocol):
    def get_by_id(self, user_id: UUID) -> User | None: ...

    def get_by_email(self, email: str) -> User | None: ...

    def save(self, user: User) -> User: ...

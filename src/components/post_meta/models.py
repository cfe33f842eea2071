"""
Post meta component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from src.domain.entities import DocumentMeta, User

# Form field names submitted by the meta box
FIELD_CUSTOM_TITLE = "db_seo_custom_meta_title"
FIELD_CUSTOM_DESCRIPTION = "db_seo_custom_meta_description"
FIELD_CUSTOM_IMAGE = "db_seo_custom_image"
FIELD_OG_TYPE = "db_seo_og_type"

SkipReason = Literal["missing_nonce", "invalid_nonce", "autosave", "forbidden"]


@dataclass(frozen=True)
class GetMetaInput:
    """Input for reading a document's SEO metadata."""

    document_id: int


@dataclass(frozen=True)
class GetMetaOutput:
    document_id: int
    meta: DocumentMeta


@dataclass(frozen=True)
class SaveMetaInput:
    """
    A meta box submission.

    fields holds the raw submitted form values keyed by form field name;
    fields that were not submitted are left untouched in storage.
    """

    document_id: int
    document_type: str
    fields: dict[str, str]
    nonce: str | None
    actor: User | None
    is_autosave: bool = False


@dataclass(frozen=True)
class SaveMetaOutput:
    """Result of a save. document_id is always echoed back."""

    document_id: int
    saved: bool
    skipped_reason: SkipReason | None = None
    written: dict[str, str] = field(default_factory=dict)

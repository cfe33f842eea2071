"""
Admin forms component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.entities import OG_TYPES, DocumentMeta, SeoSettings

OG_TYPE_LABELS: dict[str, str] = {
    "website": "Website",
    "article": "Article",
    "profile": "Profile",
    "video": "Video",
    "book": "Book",
}


@dataclass(frozen=True)
class SettingsFormInput:
    """Input for rendering the settings page."""

    settings: SeoSettings
    action_url: str = "/api/admin/seo/settings/form"
    og_types: tuple[str, ...] = OG_TYPES
    notice: str = ""
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MetaBoxInput:
    """Input for rendering the per-document meta box."""

    document_id: int
    document_type: str
    meta: DocumentMeta
    nonce: str
    nonce_field: str = "db_seo_meta_box_nonce"
    og_types: tuple[str, ...] = OG_TYPES


@dataclass(frozen=True)
class FormOutput:
    """Rendered form markup. html is "" when the form does not apply."""

    html: str = ""
    post_types: list[str] = field(default_factory=list)

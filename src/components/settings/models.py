"""
SEO settings component input/output models.

The seven db_seo_* options are exchanged as a SeoSettings object; option
keys only appear at the store boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import SeoSettings


@dataclass(frozen=True)
class GetSettingsInput:
    """Read the SEO options, filling in defaults for missing keys."""

    pass


@dataclass(frozen=True)
class GetSettingsOutput:
    settings: SeoSettings


@dataclass(frozen=True)
class UpdateSettingsInput:
    """
    Partial SEO settings update.

    Keys are SeoSettings field names (og_enabled, twitter_handle, ...);
    fields not present keep their stored option value.
    """

    updates: dict[str, Any]


@dataclass(frozen=True)
class ValidationError:
    """One rejected settings field, e.g. an og type outside rules.seo.og_types."""

    field: str
    code: str  # unknown_field | max_length | invalid_value | invalid_url | invalid_type
    message: str


@dataclass(frozen=True)
class UpdateSettingsOutput:
    """settings is the stored state: unchanged when errors is non-empty."""

    settings: SeoSettings
    errors: list[ValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ResetSettingsInput:
    """Write the default value of every SEO option back to the store."""

    pass


@dataclass(frozen=True)
class ResetSettingsOutput:
    settings: SeoSettings


@dataclass
class ValidationRule:
    """Limits for one settings field, built from the seo section of rules.yaml."""

    field_name: str
    max_length: int | None = None
    allowed_values: list[str] | None = None
    is_url: bool = False

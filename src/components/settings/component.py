"""
Settings component - global SEO configuration.

Reads and writes the seven db_seo_* options through the option store.

Invariants:
- I1: Reads always succeed; missing options fall back to defaults
- I2: Updates are sanitized, then validated, and nothing is written on error
- I3: Flags are stored as "1" (on) or "" (off)
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlparse

from pydantic import ValidationError as PydanticValidationError

from src.domain.entities import (
    OG_TYPES,
    OPTION_DEFAULT_IMAGE,
    OPTION_DEFAULT_META_DESCRIPTION,
    OPTION_OG_ENABLED,
    OPTION_OG_TYPE,
    OPTION_SCHEMA_ENABLED,
    OPTION_TWITTER_ENABLED,
    OPTION_TWITTER_HANDLE,
    SeoSettings,
)
from src.domain.sanitize import sanitize_text_field, sanitize_textarea_field, sanitize_url
from src.rules.models import SeoRules

from .models import (
    GetSettingsInput,
    GetSettingsOutput,
    ResetSettingsInput,
    ResetSettingsOutput,
    UpdateSettingsInput,
    UpdateSettingsOutput,
    ValidationError,
    ValidationRule,
)
from .ports import OptionsReaderPort, OptionsRepoPort

logger = logging.getLogger(__name__)

FLAG_ON = "1"
FLAG_OFF = ""

# SeoSettings field -> option key
FIELD_OPTION_KEYS: dict[str, str] = {
    "og_enabled": OPTION_OG_ENABLED,
    "twitter_enabled": OPTION_TWITTER_ENABLED,
    "schema_enabled": OPTION_SCHEMA_ENABLED,
    "default_image_url": OPTION_DEFAULT_IMAGE,
    "twitter_handle": OPTION_TWITTER_HANDLE,
    "default_og_type": OPTION_OG_TYPE,
    "default_meta_description": OPTION_DEFAULT_META_DESCRIPTION,
}

FLAG_FIELDS = ("og_enabled", "twitter_enabled", "schema_enabled")


def build_rules(seo_rules: SeoRules | None = None) -> list[ValidationRule]:
    """Validation rules for settings updates, limits taken from rules.yaml."""
    seo_rules = seo_rules or SeoRules()
    limits = seo_rules.limits
    return [
        ValidationRule(field_name="default_og_type", allowed_values=list(seo_rules.og_types)),
        ValidationRule(field_name="default_image_url", max_length=limits.url_max, is_url=True),
        ValidationRule(field_name="twitter_handle", max_length=limits.twitter_handle_max),
        ValidationRule(field_name="default_meta_description", max_length=limits.description_max),
    ]


DEFAULT_RULES = build_rules()


def get_default_settings() -> SeoSettings:
    """Settings as they are right after activation."""
    return SeoSettings()


# --- Option Mapping ---


def settings_from_options(options: OptionsReaderPort) -> SeoSettings:
    """
    Build typed settings from the option store.

    Flags default to on. An unknown stored OG type falls back to "website".
    """
    og_type = options.get_option(OPTION_OG_TYPE, "website") or "website"
    if og_type not in OG_TYPES:
        og_type = "website"

    return SeoSettings(
        og_enabled=options.get_option(OPTION_OG_ENABLED, FLAG_ON) == FLAG_ON,
        twitter_enabled=options.get_option(OPTION_TWITTER_ENABLED, FLAG_ON) == FLAG_ON,
        schema_enabled=options.get_option(OPTION_SCHEMA_ENABLED, FLAG_ON) == FLAG_ON,
        default_image_url=options.get_option(OPTION_DEFAULT_IMAGE, "") or None,
        twitter_handle=options.get_option(OPTION_TWITTER_HANDLE, "") or None,
        default_og_type=og_type,
        default_meta_description=options.get_option(OPTION_DEFAULT_META_DESCRIPTION, "") or None,
    )


def settings_to_options(settings: SeoSettings) -> dict[str, str]:
    """Serialize settings to option key/value pairs."""
    values: dict[str, str] = {}
    for field_name, key in FIELD_OPTION_KEYS.items():
        value = getattr(settings, field_name)
        if field_name in FLAG_FIELDS:
            values[key] = FLAG_ON if value else FLAG_OFF
        else:
            values[key] = value or ""
    return values


# --- Sanitization & Validation ---


def _coerce_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "on", "yes")
    return bool(value)


def sanitize_updates(updates: dict[str, Any]) -> dict[str, Any]:
    """Apply the per-field sanitizer. Unknown keys are passed through for validation."""
    clean: dict[str, Any] = {}
    for key, value in updates.items():
        if key in FLAG_FIELDS:
            clean[key] = _coerce_flag(value)
        elif key == "default_image_url":
            clean[key] = sanitize_url(value) or None
        elif key == "default_meta_description":
            clean[key] = sanitize_textarea_field(value) or None
        elif key == "twitter_handle":
            clean[key] = sanitize_text_field(value) or None
        elif key == "default_og_type":
            clean[key] = sanitize_text_field(value) or "website"
        else:
            clean[key] = value
    return clean


def _validate_url(value: str) -> bool:
    """Validate URL format."""
    if not value:
        return True
    result = urlparse(value)
    return all([result.scheme in ("http", "https"), result.netloc])


def _validate_updates(
    updates: dict[str, Any],
    rules: list[ValidationRule],
) -> list[ValidationError]:
    errors: list[ValidationError] = []

    for key in updates:
        if key not in FIELD_OPTION_KEYS:
            errors.append(
                ValidationError(
                    field=key,
                    code="unknown_field",
                    message=f"Unknown setting '{key}'",
                )
            )

    for rule in rules:
        if rule.field_name not in updates:
            continue
        value = updates[rule.field_name]

        # Empty optional values are always valid
        if value is None or value == "":
            continue

        if isinstance(value, str) and rule.max_length is not None and len(value) > rule.max_length:
            errors.append(
                ValidationError(
                    field=rule.field_name,
                    code="max_length",
                    message=(
                        f"Field '{rule.field_name}' must not exceed {rule.max_length} characters"
                    ),
                )
            )

        if rule.allowed_values is not None and value not in rule.allowed_values:
            errors.append(
                ValidationError(
                    field=rule.field_name,
                    code="invalid_value",
                    message=(
                        f"Field '{rule.field_name}' must be one of: "
                        f"{', '.join(rule.allowed_values)}"
                    ),
                )
            )

        if rule.is_url and isinstance(value, str) and not _validate_url(value):
            errors.append(
                ValidationError(
                    field=rule.field_name,
                    code="invalid_url",
                    message=f"Field '{rule.field_name}' must be a valid http or https URL",
                )
            )

    return errors


def _parse_pydantic_errors(exc: PydanticValidationError) -> list[ValidationError]:
    """Map pydantic errors to field-specific validation errors."""
    errors: list[ValidationError] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "_schema"
        error_type = error.get("type", "unknown")
        code = "invalid_type" if "type" in error_type or "parsing" in error_type else "invalid_value"
        errors.append(
            ValidationError(
                field=field,
                code=code,
                message=f"Field '{field}': {error.get('msg', 'Invalid value')}",
            )
        )
    return errors


def _save(repo: OptionsRepoPort, settings: SeoSettings) -> None:
    for key, value in settings_to_options(settings).items():
        repo.update_option(key, value)


# --- Component Entry Points ---


def run_get(
    inp: GetSettingsInput,
    *,
    repo: OptionsReaderPort,
) -> GetSettingsOutput:
    """
    Get current settings.

    Always returns settings - uses defaults for missing options.
    """
    return GetSettingsOutput(settings=settings_from_options(repo))


def run_update(
    inp: UpdateSettingsInput,
    *,
    repo: OptionsRepoPort,
    rules: list[ValidationRule] | None = None,
) -> UpdateSettingsOutput:
    """
    Update settings.

    Sanitizes, then validates before saving.

    Args:
        inp: Input containing updates dictionary.
        repo: Option store port.
        rules: Optional custom validation rules.

    Returns:
        UpdateSettingsOutput with updated settings or validation errors.
    """
    if rules is None:
        rules = DEFAULT_RULES

    current = settings_from_options(repo)
    updates = sanitize_updates(inp.updates)

    errors = _validate_updates(updates, rules)
    if errors:
        return UpdateSettingsOutput(settings=current, errors=errors, success=False)

    merged = current.model_dump()
    merged.update(updates)
    try:
        new_settings = SeoSettings(**merged)
    except PydanticValidationError as e:
        return UpdateSettingsOutput(
            settings=current, errors=_parse_pydantic_errors(e), success=False
        )

    _save(repo, new_settings)
    logger.info("Updated SEO settings: %s", ", ".join(sorted(updates)))

    return UpdateSettingsOutput(settings=new_settings, errors=[], success=True)


def run_reset(
    inp: ResetSettingsInput,
    *,
    repo: OptionsRepoPort,
) -> ResetSettingsOutput:
    """Reset settings to defaults."""
    defaults = get_default_settings()
    _save(repo, defaults)
    logger.info("Reset SEO settings to defaults")
    return ResetSettingsOutput(settings=defaults)


def run(
    inp: GetSettingsInput | UpdateSettingsInput | ResetSettingsInput,
    *,
    repo: OptionsRepoPort,
    rules: list[ValidationRule] | None = None,
) -> GetSettingsOutput | UpdateSettingsOutput | ResetSettingsOutput:
    """
    Main entry point for the settings component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, GetSettingsInput):
        return run_get(inp, repo=repo)
    elif isinstance(inp, UpdateSettingsInput):
        return run_update(inp, repo=repo, rules=rules)
    elif isinstance(inp, ResetSettingsInput):
        return run_reset(inp, repo=repo)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

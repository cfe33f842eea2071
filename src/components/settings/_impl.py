"""
SettingsService - stateful wrapper around the settings component.

Used by the HTTP layer, which prefers a service object it can inject.

Key behaviors:
- get() always returns settings (defaults for missing options)
- update() sanitizes and validates before persisting
"""

from __future__ import annotations

from typing import Any

from src.domain.entities import SeoSettings

from .component import (
    DEFAULT_RULES,
    run_get,
    run_reset,
    run_update,
)
from .models import (
    GetSettingsInput,
    ResetSettingsInput,
    UpdateSettingsInput,
    ValidationError,
    ValidationRule,
)
from .ports import OptionsRepoPort


class SettingsService:
    """SEO settings service."""

    def __init__(
        self,
        repo: OptionsRepoPort,
        rules: list[ValidationRule] | None = None,
    ) -> None:
        self._repo = repo
        self._rules = rules or DEFAULT_RULES

    def get(self) -> SeoSettings:
        return run_get(GetSettingsInput(), repo=self._repo).settings

    def update(
        self,
        updates: dict[str, Any],
    ) -> tuple[SeoSettings, list[ValidationError]]:
        """
        Update settings.

        Returns:
            Tuple of (settings, validation_errors).
            If validation_errors is non-empty, nothing was saved.
        """
        result = run_update(UpdateSettingsInput(updates=updates), repo=self._repo, rules=self._rules)
        return result.settings, result.errors

    def reset_to_defaults(self) -> SeoSettings:
        return run_reset(ResetSettingsInput(), repo=self._repo).settings


def create_settings_service(
    repo: OptionsRepoPort,
    rules: list[ValidationRule] | None = None,
) -> SettingsService:
    """Create a settings service."""
    return SettingsService(repo, rules)

"""
Settings component - global SEO configuration.
"""

from ._impl import (
    SettingsService,
    create_settings_service,
)
from .component import (
    DEFAULT_RULES,
    FIELD_OPTION_KEYS,
    build_rules,
    get_default_settings,
    run,
    run_get,
    run_reset,
    run_update,
    sanitize_updates,
    settings_from_options,
    settings_to_options,
)
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

__all__ = [
    # Component entry points
    "run",
    "run_get",
    "run_update",
    "run_reset",
    # Models
    "GetSettingsInput",
    "GetSettingsOutput",
    "UpdateSettingsInput",
    "UpdateSettingsOutput",
    "ResetSettingsInput",
    "ResetSettingsOutput",
    "ValidationError",
    "ValidationRule",
    # Ports
    "OptionsReaderPort",
    "OptionsRepoPort",
    # Functions
    "build_rules",
    "get_default_settings",
    "sanitize_updates",
    "settings_from_options",
    "settings_to_options",
    # Constants
    "DEFAULT_RULES",
    "FIELD_OPTION_KEYS",
    # Service
    "SettingsService",
    "create_settings_service",
]

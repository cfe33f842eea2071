"""
Admin forms component - settings page and meta box markup.
"""

from .component import (
    DEFAULT_POST_TYPES,
    meta_box_post_types,
    render_meta_box,
    render_settings_form,
    settings_updates_from_form,
)
from .models import OG_TYPE_LABELS, FormOutput, MetaBoxInput, SettingsFormInput

__all__ = [
    "render_settings_form",
    "render_meta_box",
    "settings_updates_from_form",
    "meta_box_post_types",
    "DEFAULT_POST_TYPES",
    "OG_TYPE_LABELS",
    "FormOutput",
    "MetaBoxInput",
    "SettingsFormInput",
]

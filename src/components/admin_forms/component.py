"""
Admin forms component - settings page and meta box markup.

Only renders markup; saving goes through the settings and post_meta
components.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.domain.entities import (
    OPTION_DEFAULT_IMAGE,
    OPTION_DEFAULT_META_DESCRIPTION,
    OPTION_OG_ENABLED,
    OPTION_OG_TYPE,
    OPTION_SCHEMA_ENABLED,
    OPTION_TWITTER_ENABLED,
    OPTION_TWITTER_HANDLE,
)
from src.domain.sanitize import escape_attr, escape_textarea, escape_url
from src.shell.hooks.filters import META_BOX_POST_TYPES_HOOK

from .models import OG_TYPE_LABELS, FormOutput, MetaBoxInput, SettingsFormInput
from .ports import FiltersPort

DEFAULT_POST_TYPES: tuple[str, ...] = ("post", "page")

# Checkbox inputs: a browser omits unchecked boxes from the submission
FORM_FLAG_FIELDS: dict[str, str] = {
    OPTION_OG_ENABLED: "og_enabled",
    OPTION_TWITTER_ENABLED: "twitter_enabled",
    OPTION_SCHEMA_ENABLED: "schema_enabled",
}

FORM_VALUE_FIELDS: dict[str, str] = {
    OPTION_DEFAULT_IMAGE: "default_image_url",
    OPTION_TWITTER_HANDLE: "twitter_handle",
    OPTION_OG_TYPE: "default_og_type",
    OPTION_DEFAULT_META_DESCRIPTION: "default_meta_description",
}


def meta_box_post_types(
    filters: FiltersPort | None = None,
    defaults: list[str] | tuple[str, ...] = DEFAULT_POST_TYPES,
) -> list[str]:
    """Document types that get the SEO meta box, after filter hooks."""
    post_types = list(defaults)
    if filters is not None:
        post_types = list(filters.apply_filters(META_BOX_POST_TYPES_HOOK, post_types))
    return post_types


def settings_updates_from_form(form: Mapping[str, Any]) -> dict[str, Any]:
    """
    Translate a settings page submission into settings updates.

    Inputs are named by option key. A missing checkbox means the flag was
    turned off; missing text inputs leave their setting unchanged.
    """
    updates: dict[str, Any] = {
        field_name: option_key in form for option_key, field_name in FORM_FLAG_FIELDS.items()
    }
    for option_key, field_name in FORM_VALUE_FIELDS.items():
        if option_key in form:
            updates[field_name] = form[option_key]
    return updates


# --- Field Builders ---


def _checkbox(name: str, label: str, checked: bool, help_text: str) -> str:
    state = ' checked="checked"' if checked else ""
    return (
        f'<label for="{name}">'
        f'<input type="checkbox" id="{name}" name="{name}" value="1"{state} /> {label}'
        f"</label>\n"
        f'<p class="description">{help_text}</p>\n'
    )


def _select(name: str, current: str, og_types: tuple[str, ...], help_text: str) -> str:
    options = ""
    for key in og_types:
        state = ' selected="selected"' if key == current else ""
        label = OG_TYPE_LABELS.get(key, key.title())
        options += f'<option value="{escape_attr(key)}"{state}>{escape_attr(label)}</option>'
    return (
        f'<select name="{name}" id="{name}">{options}</select>\n'
        f'<p class="description">{help_text}</p>\n'
    )


def _image_field(name: str, value: str, css_class: str, help_text: str) -> str:
    html = (
        '<div class="db-seo-image-field">'
        f'<input type="text" id="{name}" name="{name}" value="{escape_attr(value)}" '
        f'class="{css_class}" />'
        "</div>\n"
    )
    if value:
        html += (
            '<div class="db-seo-image-preview">'
            f'<img src="{escape_url(value)}" alt="Preview" /></div>\n'
        )
    return html + f'<p class="description">{help_text}</p>\n'


def _row(label: str, body: str) -> str:
    return f'<tr><th scope="row">{label}</th><td>\n{body}</td></tr>\n'


def _notices(notice: str, errors: list[str]) -> str:
    html = ""
    if notice:
        html += f'<div class="notice notice-success"><p>{escape_attr(notice)}</p></div>\n'
    if errors:
        items = "".join(f"<li>{escape_attr(error)}</li>" for error in errors)
        html += f'<div class="notice notice-error"><ul>{items}</ul></div>\n'
    return html


# --- Entry Points ---


def render_settings_form(inp: SettingsFormInput) -> FormOutput:
    """Render the settings page: general and social media sections."""
    s = inp.settings
    general = "".join(
        [
            _row(
                "Enable Open Graph Tags",
                _checkbox(
                    "db_seo_og_enabled",
                    "Enable Open Graph Tags",
                    s.og_enabled,
                    "Adds Open Graph meta tags for better sharing on Facebook and other platforms.",
                ),
            ),
            _row(
                "Enable Twitter Cards",
                _checkbox(
                    "db_seo_twitter_enabled",
                    "Enable Twitter Cards",
                    s.twitter_enabled,
                    "Adds Twitter Card meta tags for better sharing on Twitter.",
                ),
            ),
            _row(
                "Enable Schema.org Markup",
                _checkbox(
                    "db_seo_schema_enabled",
                    "Enable Schema.org Markup",
                    s.schema_enabled,
                    "Adds Schema.org structured data for better search engine understanding "
                    "of your content.",
                ),
            ),
            _row(
                "Default Meta Description",
                '<textarea id="db_seo_default_meta_description" '
                'name="db_seo_default_meta_description" rows="3" class="large-text">'
                f"{escape_textarea(s.default_meta_description)}</textarea>\n"
                '<p class="description">Enter a default meta description to use if no custom '
                "description is provided.</p>\n",
            ),
        ]
    )
    social = "".join(
        [
            _row(
                "Default Image URL",
                _image_field(
                    "db_seo_default_image",
                    s.default_image_url or "",
                    "regular-text",
                    "Enter the URL of the default image to be used if no other image is defined.",
                ),
            ),
            _row(
                "Twitter Site Handle",
                '<input type="text" id="db_seo_twitter_handle" name="db_seo_twitter_handle" '
                f'value="{escape_attr(s.twitter_handle)}" class="regular-text" />\n'
                '<p class="description">Enter the Twitter handle for the site '
                "(e.g., @yoursite).</p>\n",
            ),
            _row(
                "Default Open Graph Type",
                _select(
                    "db_seo_og_type",
                    s.default_og_type,
                    inp.og_types,
                    "Select the default Open Graph type to use for the home page or generic pages.",
                ),
            ),
        ]
    )

    html = (
        '<div class="wrap db-seo-settings-page">\n'
        "<h1>DB SEO Settings</h1>\n"
        + _notices(inp.notice, inp.errors)
        + f'<form method="post" action="{escape_url(inp.action_url)}">\n'
        "<h2>General Settings</h2>\n"
        "<p>Configure the general SEO settings for your site.</p>\n"
        f'<table class="form-table">\n{general}</table>\n'
        "<h2>Social Media Settings</h2>\n"
        "<p>Configure how your content appears when shared on social media platforms.</p>\n"
        f'<table class="form-table">\n{social}</table>\n'
        '<p class="submit"><input type="submit" class="button button-primary" '
        'value="Save Changes" /></p>\n'
        "</form>\n</div>\n"
    )
    return FormOutput(html=html)


def render_meta_box(
    inp: MetaBoxInput,
    *,
    filters: FiltersPort | None = None,
    post_types: list[str] | None = None,
) -> FormOutput:
    """
    Render the per-document meta box.

    Returns an empty form when the document type is not in the
    (filterable) meta box post types. Pass post_types when they were
    already resolved so the filter runs once.
    """
    if post_types is None:
        post_types = meta_box_post_types(filters)
    if inp.document_type not in post_types:
        return FormOutput(html="", post_types=post_types)

    meta = inp.meta
    og_type = meta.og_type or "article"

    html = (
        '<div class="db-seo-meta-box">\n'
        f'<input type="hidden" id="{inp.nonce_field}" name="{inp.nonce_field}" '
        f'value="{escape_attr(inp.nonce)}" />\n'
        '<p><label for="db_seo_custom_meta_title"><strong>Custom Meta Title:</strong></label>\n'
        '<input type="text" id="db_seo_custom_meta_title" name="db_seo_custom_meta_title" '
        f'value="{escape_attr(meta.custom_title)}" class="widefat" />\n'
        '<span class="description">Enter a custom title for social sharing and search results.'
        "</span></p>\n"
        '<p><label for="db_seo_custom_meta_description"><strong>Custom Meta Description:'
        "</strong></label>\n"
        '<textarea id="db_seo_custom_meta_description" name="db_seo_custom_meta_description" '
        f'class="widefat" rows="3">{escape_textarea(meta.custom_description)}</textarea>\n'
        '<span class="description">Enter a custom description for social sharing and search '
        "results.</span></p>\n"
        '<p><label for="db_seo_custom_image"><strong>Custom Image URL:</strong></label></p>\n'
        + _image_field(
            "db_seo_custom_image",
            meta.custom_image_url or "",
            "widefat",
            "Select an image to use for social sharing.",
        )
        + '<p><label for="db_seo_og_type"><strong>Open Graph Type:</strong></label></p>\n'
        + _select("db_seo_og_type", og_type, inp.og_types, "Select the Open Graph type for this post/page.")
        + "</div>\n"
    )
    return FormOutput(html=html, post_types=post_types)

"""
Admin SEO Settings API.

GET/PUT endpoints for the global SEO configuration, plus the rendered
settings page.

- GET returns settings (defaults for missing options)
- PUT validates fields, returns 400 with actionable messages on failure
- POST /form takes the settings page submission (form-encoded, option keys)
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from src.api.deps import get_rules, get_settings_service, require_manage_options
from src.components.admin_forms import (
    SettingsFormInput,
    render_settings_form,
    settings_updates_from_form,
)
from src.components.settings import SettingsService, ValidationError
from src.domain.entities import SeoSettings, User
from src.rules.models import Rules

router = APIRouter()


# --- Request/Response Models ---


class SettingsResponse(BaseModel):
    """Settings response model."""

    og_enabled: bool
    twitter_enabled: bool
    schema_enabled: bool
    default_image_url: str | None
    twitter_handle: str | None
    default_og_type: str
    default_meta_description: str | None


class SettingsUpdateRequest(BaseModel):
    """Settings update request model. Omitted fields are left unchanged."""

    og_enabled: bool | None = None
    twitter_enabled: bool | None = None
    schema_enabled: bool | None = None
    default_image_url: str | None = None
    twitter_handle: str | None = None
    default_og_type: str | None = None
    default_meta_description: str | None = None


class ValidationErrorResponse(BaseModel):
    """Validation error response."""

    field: str
    code: str
    message: str


class ErrorResponse(BaseModel):
    """Error response with validation errors."""

    detail: str
    errors: list[ValidationErrorResponse]


# --- Helper Functions ---


def settings_to_response(settings: SeoSettings) -> SettingsResponse:
    return SettingsResponse(**settings.model_dump())


def validation_errors_to_response(errors: list[ValidationError]) -> list[ValidationErrorResponse]:
    """Convert validation errors to response models."""
    return [
        ValidationErrorResponse(
            field=e.field,
            code=e.code,
            message=e.message,
        )
        for e in errors
    ]


# --- Endpoints ---


@router.get(
    "",
    response_model=SettingsResponse,
    summary="Get SEO settings",
    description="Get current SEO settings. Returns defaults if not configured.",
)
def get_seo_settings(
    current_user: User = Depends(require_manage_options),
    service: SettingsService = Depends(get_settings_service),
) -> SettingsResponse:
    return settings_to_response(service.get())


@router.put(
    "",
    response_model=SettingsResponse,
    summary="Update SEO settings",
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Validation errors with actionable messages",
        },
    },
)
def update_seo_settings(
    request: SettingsUpdateRequest,
    current_user: User = Depends(require_manage_options),
    service: SettingsService = Depends(get_settings_service),
) -> Any:
    """
    Update SEO settings.

    Only fields present in the request body are applied. Nothing is
    persisted if any field fails validation.
    """
    updates: dict[str, Any] = request.model_dump(exclude_unset=True)

    settings, errors = service.update(updates)

    if errors:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Validation failed",
                "errors": [e.model_dump() for e in validation_errors_to_response(errors)],
            },
        )

    return settings_to_response(settings)


@router.post(
    "/reset",
    response_model=SettingsResponse,
    summary="Reset SEO settings to defaults",
)
def reset_seo_settings(
    current_user: User = Depends(require_manage_options),
    service: SettingsService = Depends(get_settings_service),
) -> SettingsResponse:
    return settings_to_response(service.reset_to_defaults())


@router.get(
    "/form",
    response_class=HTMLResponse,
    summary="SEO settings page",
)
def settings_form(
    current_user: User = Depends(require_manage_options),
    service: SettingsService = Depends(get_settings_service),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    form = render_settings_form(
        SettingsFormInput(settings=service.get(), og_types=tuple(rules.seo.og_types))
    )
    return HTMLResponse(content=form.html, status_code=200)


@router.post(
    "/form",
    response_class=HTMLResponse,
    summary="Submit SEO settings page",
)
async def submit_settings_form(
    request: Request,
    current_user: User = Depends(require_manage_options),
    service: SettingsService = Depends(get_settings_service),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    """
    Save a settings page submission and re-render the page.

    Unchecked checkboxes are absent from the body and turn their flag off.
    Returns 400 with the error list when validation fails.
    """
    form = await request.form()
    settings, errors = service.update(settings_updates_from_form(form))

    page = SettingsFormInput(
        settings=settings,
        og_types=tuple(rules.seo.og_types),
        notice="" if errors else "Settings saved.",
        errors=[e.message for e in errors],
    )
    return HTMLResponse(
        content=render_settings_form(page).html,
        status_code=status.HTTP_400_BAD_REQUEST if errors else status.HTTP_200_OK,
    )

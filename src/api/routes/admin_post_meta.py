"""
Admin document SEO API.

Serves the per-document meta box and accepts its submissions.

Saves follow the meta box contract: a rejected submission (missing or
invalid nonce, autosave, missing capability) is not an error. The
response carries saved=false and the reason, and nothing is written.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from src.adapters.auth.crypto import JWTNonceAdapter
from src.adapters.sqlite.repos import SQLiteDocumentRepo, SQLitePostMetaRepo
from src.api.deps import (
    get_current_user,
    get_document_repo,
    get_filter_registry,
    get_nonce_adapter,
    get_optional_user,
    get_policy,
    get_post_meta_repo,
    get_rules,
)
from src.components.admin_forms import MetaBoxInput, meta_box_post_types, render_meta_box
from src.components.post_meta import (
    FIELD_CUSTOM_DESCRIPTION,
    FIELD_CUSTOM_IMAGE,
    FIELD_CUSTOM_TITLE,
    FIELD_OG_TYPE,
    GetMetaInput,
    SaveMetaInput,
    required_capability,
    run_get,
    run_save,
)
from src.domain.entities import Document, User
from src.domain.policy import PolicyEngine
from src.rules.models import Rules
from src.shell.hooks.filters import FilterRegistry

router = APIRouter()


# --- Request/Response Models ---


class MetaBoxSubmission(BaseModel):
    """Meta box form fields. Omitted fields are left unchanged."""

    db_seo_meta_box_nonce: str | None = None
    db_seo_custom_meta_title: str | None = None
    db_seo_custom_meta_description: str | None = None
    db_seo_custom_image: str | None = None
    db_seo_og_type: str | None = None
    autosave: bool = Field(default=False, description="True when sent by an autosave")


class DocumentMetaResponse(BaseModel):
    document_id: int
    custom_title: str | None
    custom_description: str | None
    custom_image_url: str | None
    og_type: str | None


class SaveMetaResponse(BaseModel):
    document_id: int
    saved: bool
    skipped_reason: str | None = None
    written: dict[str, str] = Field(default_factory=dict)


FORM_FIELDS = (FIELD_CUSTOM_TITLE, FIELD_CUSTOM_DESCRIPTION, FIELD_CUSTOM_IMAGE, FIELD_OG_TYPE)


# --- Helper Functions ---


def _get_document_or_404(repo: SQLiteDocumentRepo, document_id: int) -> Document:
    document = repo.get_by_id(document_id)
    if document is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document not found")
    return document


def submitted_fields(submission: MetaBoxSubmission) -> dict[str, str]:
    """Form fields that were actually sent, as raw strings."""
    sent = submission.model_dump(exclude_unset=True)
    return {name: sent[name] or "" for name in FORM_FIELDS if name in sent}


# --- Endpoints ---


@router.get(
    "/{document_id}/meta",
    response_model=DocumentMetaResponse,
    summary="Get document SEO metadata",
)
def get_document_meta(
    document_id: int,
    current_user: User = Depends(get_current_user),
    documents: SQLiteDocumentRepo = Depends(get_document_repo),
    meta_repo: SQLitePostMetaRepo = Depends(get_post_meta_repo),
) -> DocumentMetaResponse:
    _get_document_or_404(documents, document_id)
    result = run_get(GetMetaInput(document_id=document_id), repo=meta_repo)
    return DocumentMetaResponse(document_id=document_id, **result.meta.model_dump())


@router.get(
    "/{document_id}/meta-box",
    response_class=HTMLResponse,
    summary="Document SEO meta box",
)
def get_meta_box(
    document_id: int,
    current_user: User = Depends(get_current_user),
    documents: SQLiteDocumentRepo = Depends(get_document_repo),
    meta_repo: SQLitePostMetaRepo = Depends(get_post_meta_repo),
    policy: PolicyEngine = Depends(get_policy),
    nonces: JWTNonceAdapter = Depends(get_nonce_adapter),
    filters: FilterRegistry = Depends(get_filter_registry),
    rules: Rules = Depends(get_rules),
) -> HTMLResponse:
    """
    Render the meta box for a document.

    404 when the document type has no meta box.
    """
    document = _get_document_or_404(documents, document_id)

    if not policy.can(current_user, required_capability(document.type), document_id):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You do not have permission to edit this document",
        )

    post_types = meta_box_post_types(filters, rules.seo.meta_box_post_types)
    if document.type not in post_types:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No SEO meta box for document type '{document.type}'",
        )

    nonce_rules = rules.security.nonce
    form = render_meta_box(
        MetaBoxInput(
            document_id=document_id,
            document_type=document.type,
            meta=run_get(GetMetaInput(document_id=document_id), repo=meta_repo).meta,
            nonce=nonces.create_nonce(nonce_rules.action, current_user),
            nonce_field=nonce_rules.field_name,
            og_types=tuple(rules.seo.og_types),
        ),
        filters=filters,
        post_types=post_types,
    )
    return HTMLResponse(content=form.html, status_code=200)


@router.post(
    "/{document_id}/meta",
    response_model=SaveMetaResponse,
    summary="Save document SEO metadata",
)
def save_document_meta(
    document_id: int,
    submission: MetaBoxSubmission,
    current_user: User | None = Depends(get_optional_user),
    documents: SQLiteDocumentRepo = Depends(get_document_repo),
    meta_repo: SQLitePostMetaRepo = Depends(get_post_meta_repo),
    policy: PolicyEngine = Depends(get_policy),
    nonces: JWTNonceAdapter = Depends(get_nonce_adapter),
    rules: Rules = Depends(get_rules),
) -> Any:
    document = _get_document_or_404(documents, document_id)

    result = run_save(
        SaveMetaInput(
            document_id=document_id,
            document_type=document.type,
            fields=submitted_fields(submission),
            nonce=submission.db_seo_meta_box_nonce,
            actor=current_user,
            is_autosave=submission.autosave,
        ),
        repo=meta_repo,
        nonces=nonces,
        permissions=policy,
        nonce_action=rules.security.nonce.action,
    )
    return SaveMetaResponse(
        document_id=result.document_id,
        saved=result.saved,
        skipped_reason=result.skipped_reason,
        written=result.written,
    )

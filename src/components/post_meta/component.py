"""
Post meta component - per-document SEO fields.

Reads the four _db_seo_* meta values for a document and handles meta box
submissions.

Invariants:
- I1: A save writes nothing unless the nonce verifies, the request is not
  an autosave and the actor may edit the document
- I2: Rejected saves are silent: no exception, the document id is returned
- I3: Values are sanitized on save; image URLs keep their scheme (no https rewrite)
- I4: Only submitted fields are written
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from src.domain.entities import (
    META_CUSTOM_DESCRIPTION,
    META_CUSTOM_IMAGE,
    META_CUSTOM_TITLE,
    META_OG_TYPE,
    DocumentMeta,
)
from src.domain.sanitize import sanitize_text_field, sanitize_textarea_field, sanitize_url

from .models import (
    FIELD_CUSTOM_DESCRIPTION,
    FIELD_CUSTOM_IMAGE,
    FIELD_CUSTOM_TITLE,
    FIELD_OG_TYPE,
    GetMetaInput,
    GetMetaOutput,
    SaveMetaInput,
    SaveMetaOutput,
    SkipReason,
)
from .ports import MetaReaderPort, MetaRepoPort, NonceVerifierPort, PermissionPort

logger = logging.getLogger(__name__)

NONCE_ACTION = "db_seo_save_meta_box"

# form field -> (meta key, sanitizer), in save order
SAVE_PLAN: tuple[tuple[str, str, Callable[[str | None], str]], ...] = (
    (FIELD_CUSTOM_TITLE, META_CUSTOM_TITLE, sanitize_text_field),
    (FIELD_CUSTOM_DESCRIPTION, META_CUSTOM_DESCRIPTION, sanitize_textarea_field),
    (FIELD_CUSTOM_IMAGE, META_CUSTOM_IMAGE, sanitize_url),
    (FIELD_OG_TYPE, META_OG_TYPE, sanitize_text_field),
)


def load_document_meta(meta: MetaReaderPort, document_id: int | None) -> DocumentMeta:
    """Read a document's SEO fields. No document id means no metadata."""
    if document_id is None:
        return DocumentMeta()
    return DocumentMeta(
        custom_title=meta.get_meta(document_id, META_CUSTOM_TITLE) or None,
        custom_description=meta.get_meta(document_id, META_CUSTOM_DESCRIPTION) or None,
        custom_image_url=meta.get_meta(document_id, META_CUSTOM_IMAGE) or None,
        og_type=meta.get_meta(document_id, META_OG_TYPE) or None,
    )


def required_capability(document_type: str) -> str:
    """Pages need edit_page, everything else edit_post."""
    return "edit_page" if document_type == "page" else "edit_post"


# --- Component Entry Points ---


def run_get(inp: GetMetaInput, *, repo: MetaReaderPort) -> GetMetaOutput:
    return GetMetaOutput(document_id=inp.document_id, meta=load_document_meta(repo, inp.document_id))


def run_save(
    inp: SaveMetaInput,
    *,
    repo: MetaRepoPort,
    nonces: NonceVerifierPort,
    permissions: PermissionPort,
    nonce_action: str = NONCE_ACTION,
) -> SaveMetaOutput:
    """
    Save a meta box submission.

    Args:
        inp: Submitted fields plus request context.
        repo: Post meta store.
        nonces: Nonce verifier.
        permissions: Capability checker.
        nonce_action: Action the nonce must have been issued for.

    Returns:
        SaveMetaOutput; saved is False with a skipped_reason when rejected.
    """

    def skipped(reason: SkipReason) -> SaveMetaOutput:
        logger.warning("Skipped SEO meta save for document %s: %s", inp.document_id, reason)
        return SaveMetaOutput(document_id=inp.document_id, saved=False, skipped_reason=reason)

    if not inp.nonce:
        return skipped("missing_nonce")

    if inp.actor is None or not nonces.verify_nonce(inp.nonce, nonce_action, inp.actor):
        return skipped("invalid_nonce")

    if inp.is_autosave:
        # Autosaves carry transient content; keep the last explicit save
        logger.debug("Ignoring autosave for document %s", inp.document_id)
        return SaveMetaOutput(document_id=inp.document_id, saved=False, skipped_reason="autosave")

    capability = required_capability(inp.document_type)
    if not permissions.can(inp.actor, capability, inp.document_id):
        return skipped("forbidden")

    written: dict[str, str] = {}
    for field_name, meta_key, sanitizer in SAVE_PLAN:
        if field_name not in inp.fields:
            continue
        value = sanitizer(inp.fields[field_name])
        repo.update_meta(inp.document_id, meta_key, value)
        written[meta_key] = value

    logger.info("Saved %d SEO meta field(s) for document %s", len(written), inp.document_id)
    return SaveMetaOutput(document_id=inp.document_id, saved=True, written=written)


def run(
    inp: GetMetaInput | SaveMetaInput,
    *,
    repo: MetaRepoPort,
    nonces: NonceVerifierPort | None = None,
    permissions: PermissionPort | None = None,
) -> GetMetaOutput | SaveMetaOutput:
    """
    Main entry point for the post meta component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, GetMetaInput):
        return run_get(inp, repo=repo)
    elif isinstance(inp, SaveMetaInput):
        if nonces is None or permissions is None:
            raise ValueError("Saving meta requires nonce and permission ports")
        return run_save(inp, repo=repo, nonces=nonces, permissions=permissions)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

"""
Post meta component - per-document SEO fields and meta box saves.
"""

from .component import (
    NONCE_ACTION,
    load_document_meta,
    required_capability,
    run,
    run_get,
    run_save,
)
from .models import (
    FIELD_CUSTOM_DESCRIPTION,
    FIELD_CUSTOM_IMAGE,
    FIELD_CUSTOM_TITLE,
    FIELD_OG_TYPE,
    GetMetaInput,
    GetMetaOutput,
    SaveMetaInput,
    SaveMetaOutput,
)
from .ports import MetaReaderPort, MetaRepoPort, NonceVerifierPort, PermissionPort

__all__ = [
    "run",
    "run_get",
    "run_save",
    "load_document_meta",
    "required_capability",
    "NONCE_ACTION",
    "FIELD_CUSTOM_TITLE",
    "FIELD_CUSTOM_DESCRIPTION",
    "FIELD_CUSTOM_IMAGE",
    "FIELD_OG_TYPE",
    "GetMetaInput",
    "GetMetaOutput",
    "SaveMetaInput",
    "SaveMetaOutput",
    "MetaReaderPort",
    "MetaRepoPort",
    "NonceVerifierPort",
    "PermissionPort",
]

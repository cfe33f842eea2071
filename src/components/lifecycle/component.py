"""
Lifecycle component - activation defaults and uninstall cleanup.

Invariants:
- I1: Activation never overwrites an existing option
- I2: Uninstall removes every db_seo_* option and every _db_seo_* meta row
"""

from __future__ import annotations

import logging

from src.domain.entities import (
    META_PREFIX,
    OPTION_KEYS,
    OPTION_OG_ENABLED,
    OPTION_SCHEMA_ENABLED,
    OPTION_TWITTER_ENABLED,
)

from .models import ActivateInput, ActivateOutput, UninstallInput, UninstallOutput
from .ports import MetaRepoPort, OptionsRepoPort

logger = logging.getLogger(__name__)

ACTIVATION_DEFAULTS: dict[str, str] = {
    OPTION_OG_ENABLED: "1",
    OPTION_TWITTER_ENABLED: "1",
    OPTION_SCHEMA_ENABLED: "1",
}


def run_activate(inp: ActivateInput, *, options: OptionsRepoPort) -> ActivateOutput:
    """Seed the enable flags, leaving existing values alone."""
    added = [key for key, value in ACTIVATION_DEFAULTS.items() if options.add_option(key, value)]
    logger.info("Activated: %d default option(s) added", len(added))
    return ActivateOutput(added=added)


def run_uninstall(
    inp: UninstallInput,
    *,
    options: OptionsRepoPort,
    meta: MetaRepoPort,
) -> UninstallOutput:
    """Delete all settings and all per-document SEO metadata."""
    options_deleted = sum(1 for key in OPTION_KEYS if options.delete_option(key))
    meta_deleted = meta.delete_by_prefix(META_PREFIX)
    logger.info(
        "Uninstalled: removed %d option(s) and %d meta row(s)", options_deleted, meta_deleted
    )
    return UninstallOutput(options_deleted=options_deleted, meta_deleted=meta_deleted)


def run(
    inp: ActivateInput | UninstallInput,
    *,
    options: OptionsRepoPort,
    meta: MetaRepoPort | None = None,
) -> ActivateOutput | UninstallOutput:
    """
    Main entry point for the lifecycle component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ActivateInput):
        return run_activate(inp, options=options)
    elif isinstance(inp, UninstallInput):
        if meta is None:
            raise ValueError("Uninstall requires the meta store")
        return run_uninstall(inp, options=options, meta=meta)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

# db-seo — Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.db import (
    DocumentRepoPort,
    MetaReaderPort,
    MetaRepoPort,
    OptionsReaderPort,
    OptionsRepoPort,
    UserRepoPort,
)

__all__ = [
    "DocumentRepoPort",
    "MetaReaderPort",
    "MetaRepoPort",
    "OptionsReaderPort",
    "OptionsRepoPort",
    "UserRepoPort",
]

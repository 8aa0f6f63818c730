"""
TLD sources package for tldscan.

Re-exports the source interfaces and concrete implementations, plus the
selection helper used by the orchestrator.
"""

from __future__ import annotations

from typing import Optional

from tldscan.config import Settings, get_settings
from tldscan.domain.models import RunConfig
from tldscan.sources.abstract import AbstractTldSource, TldSource
from tldscan.sources.local_file import LocalFileSource
from tldscan.sources.remote import RemoteSource


def resolve_source(config: RunConfig, settings: Optional[Settings] = None) -> TldSource:
    """Use the local list when one is configured, otherwise the remote list."""
    settings = settings or get_settings()
    if config.list_file is not None:
        return LocalFileSource(config.list_file)
    return RemoteSource(url=settings.tld_list_url, timeout=settings.fetch_timeout_seconds)


__all__ = [
    # Abstracts
    "AbstractTldSource",
    "TldSource",
    # Concrete sources
    "LocalFileSource",
    "RemoteSource",
    "resolve_source",
]

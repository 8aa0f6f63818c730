"""
tldscan - pair a second-level label with every top-level domain.

This package builds domain-name candidates such as `example.com`,
`example.net`, ... from a TLD list (the IANA list or a local file), optionally
checks each one with a DNS forward lookup, and prints the results or appends
them to a file.

Availability is an approximation: a name that resolves is treated as
registered, and a name that does not resolve is treated as available.
"""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

# Public API exports
from tldscan.checker import AvailabilityChecker
from tldscan.config import Settings, get_settings
from tldscan.domain.models import CheckOutcome, DomainCandidate, RunConfig, RunSummary, TldList
from tldscan.domain.tlds import build_candidate, build_candidates, parse_tld_list, validate_tld
from tldscan.errors import (
    CheckError,
    SinkWriteError,
    SourceError,
    SourceFetchError,
    SourceReadError,
    TldScanError,
)
from tldscan.orchestrator import available_modes, run, run_pipeline
from tldscan.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "CheckOutcome",
    "DomainCandidate",
    "RunConfig",
    "RunSummary",
    "TldList",
    "build_candidate",
    "build_candidates",
    "parse_tld_list",
    "validate_tld",
    # Checking
    "AvailabilityChecker",
    # Orchestration
    "available_modes",
    "run",
    "run_pipeline",
    # Errors
    "TldScanError",
    "SourceError",
    "SourceReadError",
    "SourceFetchError",
    "CheckError",
    "SinkWriteError",
    # Logging
    "configure_logging",
    "get_logger",
]

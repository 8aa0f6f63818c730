"""
Domain package for tldscan.

Exports the core domain models and the pure TLD list helpers used by the
orchestrator. Keep this package free of network and file I/O.
"""

from tldscan.domain.models import (
    CheckOutcome,
    DomainCandidate,
    RunConfig,
    RunSummary,
    TldList,
)
from tldscan.domain.tlds import (
    build_candidate,
    build_candidates,
    parse_tld_list,
    validate_tld,
)

__all__ = [
    "CheckOutcome",
    "DomainCandidate",
    "RunConfig",
    "RunSummary",
    "TldList",
    "build_candidate",
    "build_candidates",
    "parse_tld_list",
    "validate_tld",
]

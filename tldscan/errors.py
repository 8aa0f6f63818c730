"""
Exception hierarchy for tldscan.

Source errors are fatal and abort a run before any candidate is processed.
Check and sink errors are scoped to a single candidate and never affect
sibling candidates.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tldscan.domain.models import DomainCandidate


class TldScanError(Exception):
    """Base class for all tldscan errors."""


class SourceError(TldScanError):
    """The TLD list could not be obtained."""

    def __init__(self, location: str, reason: str) -> None:
        super().__init__(f"{location}: {reason}")
        self.location = location
        self.reason = reason


class SourceReadError(SourceError):
    """A local TLD list file is missing, unreadable, or not UTF-8 text."""


class SourceFetchError(SourceError):
    """The remote TLD list request failed or returned a non-success status."""

    def __init__(self, location: str, reason: str, status_code: Optional[int] = None) -> None:
        super().__init__(location, reason)
        self.status_code = status_code


class CheckError(TldScanError):
    """
    A forward lookup for a single candidate failed.

    `definitive` is True when the resolver reported that the name does not
    exist, as opposed to a timeout or transport problem.
    """

    def __init__(self, candidate: DomainCandidate, reason: str, definitive: bool = False) -> None:
        super().__init__(f"{candidate.full}: {reason}")
        self.candidate = candidate
        self.reason = reason
        self.definitive = definitive


class SinkWriteError(TldScanError):
    """A result line could not be written to its destination."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "TldScanError",
    "SourceError",
    "SourceReadError",
    "SourceFetchError",
    "CheckError",
    "SinkWriteError",
]

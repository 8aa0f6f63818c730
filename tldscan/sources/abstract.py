"""
Abstract TLD source interfaces for tldscan.

Concrete sources (local file, remote HTTP) implement the TldSource protocol
and return the raw list text. Parsing happens in `tldscan.domain.tlds`.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable


@runtime_checkable
class TldSource(Protocol):
    """
    Common interface all TLD sources must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    location : str
        Human-readable origin of the list (URL or path), used in messages.
    """

    name: str
    location: str

    async def load(self) -> str:
        """
        Return the full list text.

        Raises
        ------
        SourceError
            If the list cannot be obtained. Sources never retry.
        """
        ...


class AbstractTldSource(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `location` and implement `load`.
    """

    name: str
    location: str

    @abc.abstractmethod
    async def load(self) -> str:  # pragma: no cover - interface only
        """Fetch or read the raw TLD list text."""
        raise NotImplementedError


__all__ = [
    "TldSource",
    "AbstractTldSource",
]

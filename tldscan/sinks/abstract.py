"""
Abstract result sink interfaces for tldscan.

A sink receives every candidate together with its outcome and decides,
according to its policy, whether to write it.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable

from tldscan.domain.models import CheckOutcome, DomainCandidate


@runtime_checkable
class ResultSink(Protocol):
    """
    Common interface for console and file sinks.

    Results may arrive in any order; sinks must not assume source order.
    """

    name: str

    async def emit(self, candidate: DomainCandidate, outcome: CheckOutcome) -> bool:
        """
        Write the result if the sink's policy allows it.

        Returns
        -------
        bool
            True when a line was written.

        Raises
        ------
        SinkWriteError
            If the destination could not be written.
        """
        ...


class AbstractResultSink(abc.ABC):
    """
    Base class holding the show-all / show-only-available policy.
    """

    name: str

    def __init__(self, suppress_unavailable: bool = False) -> None:
        self.suppress_unavailable = suppress_unavailable

    def accepts(self, outcome: CheckOutcome) -> bool:
        return outcome is CheckOutcome.AVAILABLE or not self.suppress_unavailable

    @abc.abstractmethod
    async def emit(
        self, candidate: DomainCandidate, outcome: CheckOutcome
    ) -> bool:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = ["AbstractResultSink", "ResultSink"]

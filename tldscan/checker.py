"""
DNS-based availability checks for tldscan.

A candidate is considered registered when a forward lookup returns any
address. Every failure (NXDOMAIN, timeout, resolver error, malformed name) is
reported as available unless strict lookups are enabled, in which case only
"name not known" counts as available and other failures become ERROR.

Lookups go through aiodns (c-ares), which queries without blocking a thread,
so the concurrency bound is the only queue a lookup waits in.

This is an approximation, not an authoritative registration check.
"""

from __future__ import annotations

import asyncio
import socket
from typing import Awaitable, Callable, List, Optional

import aiodns
from aiodns.error import ARES_EBADNAME, ARES_ENODATA, ARES_ENOTFOUND, DNSError

from tldscan.config import get_settings
from tldscan.domain.models import CheckOutcome, DomainCandidate
from tldscan.errors import CheckError
from tldscan.utils.logging import get_logger

log = get_logger(__name__)

Resolver = Callable[[str], Awaitable[List[str]]]

# c-ares codes meaning the name does not exist or cannot exist.
_NOT_FOUND_CODES = frozenset({ARES_ENOTFOUND, ARES_ENODATA, ARES_EBADNAME})


class AresResolver:
    """
    Forward lookup through `aiodns.DNSResolver.gethostbyname`.

    The underlying resolver is created on first use so it binds to the
    running event loop. Each lookup is a single try bounded by `timeout`.
    """

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        self._resolver: Optional[aiodns.DNSResolver] = None

    async def __call__(self, host: str) -> List[str]:
        if self._resolver is None:
            self._resolver = aiodns.DNSResolver(timeout=self.timeout, tries=1)
        result = await self._resolver.gethostbyname(host, socket.AF_INET)
        return sorted(set(result.addresses))


class AvailabilityChecker:
    """
    One existence lookup per candidate.

    Parameters
    ----------
    timeout : float | None
        Seconds before a lookup is abandoned. Defaults to settings.
    concurrency : int | None
        Maximum lookups in flight at once. Defaults to settings.
    strict : bool | None
        Report non-definitive failures as ERROR instead of AVAILABLE.
    resolver : Resolver | None
        Coroutine mapping a host name to addresses; replaceable in tests.
        Defaults to an `AresResolver` using the same timeout.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        concurrency: Optional[int] = None,
        strict: Optional[bool] = None,
        resolver: Optional[Resolver] = None,
    ) -> None:
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.lookup_timeout_seconds
        self.concurrency = concurrency or settings.check_concurrency
        self.strict = settings.strict_lookup if strict is None else strict
        self._resolver = resolver or AresResolver(timeout=self.timeout)
        self._semaphore = asyncio.Semaphore(self.concurrency)

    async def lookup(self, candidate: DomainCandidate) -> List[str]:
        """
        Resolve the candidate once.

        Raises
        ------
        CheckError
            On any resolution failure. `definitive` is set when the resolver
            says the name does not exist or is not a valid host name.
        """
        host = candidate.full
        try:
            async with self._semaphore:
                return await asyncio.wait_for(self._resolver(host), timeout=self.timeout)
        except asyncio.TimeoutError as exc:
            raise CheckError(candidate, f"lookup timed out after {self.timeout}s") from exc
        except DNSError as exc:
            code = exc.args[0] if exc.args else None
            reason = exc.args[1] if len(exc.args) > 1 else str(exc)
            raise CheckError(candidate, reason, definitive=code in _NOT_FOUND_CODES) from exc
        except UnicodeError as exc:
            raise CheckError(candidate, "invalid host name", definitive=True) from exc
        except OSError as exc:
            raise CheckError(candidate, exc.strerror or str(exc)) from exc

    async def check(self, candidate: DomainCandidate) -> CheckOutcome:
        try:
            addresses = await self.lookup(candidate)
        except CheckError as exc:
            log.debug(
                "Lookup failed",
                extra={"domain": candidate.full, "reason": exc.reason, "definitive": exc.definitive},
            )
            if self.strict and not exc.definitive:
                return CheckOutcome.ERROR
            return CheckOutcome.AVAILABLE

        if not addresses:
            return CheckOutcome.AVAILABLE
        return CheckOutcome.UNAVAILABLE


__all__ = ["AresResolver", "AvailabilityChecker", "Resolver"]

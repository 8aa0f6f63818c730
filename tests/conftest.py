"""
Pytest configuration for tldscan.

Provides fixtures for:
- Settings with test-friendly timeouts and no startup delay
- Local TLD list files
- In-memory sources, sinks, resolvers and consoles so unit tests never touch
  the network
"""

from __future__ import annotations

import asyncio
import io
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

import pytest
from aiodns.error import ARES_ENOTFOUND, DNSError
from rich.console import Console

from tldscan.config import Settings
from tldscan.domain.models import CheckOutcome, DomainCandidate

SAMPLE_TLD_TEXT = "#header\ncom\nnet\nxn--p1ai\nco-op\n"

IANA_STYLE_TEXT = (
    "# Version 2024101900, Last Updated Sat Oct 19 07:07:01 2024 UTC\r\n"
    "AAA\r\n"
    "COM\r\n"
    "IO\r\n"
    "NET\r\n"
    "ORG\r\n"
    "XN--P1AI\r\n"
)


class StubSource:
    """TldSource returning fixed text, or raising a prepared error."""

    def __init__(
        self,
        text: str = "",
        error: Optional[Exception] = None,
        name: str = "file",
        location: str = "stub.txt",
    ) -> None:
        self.text = text
        self.error = error
        self.name = name
        self.location = location
        self.load_calls = 0

    async def load(self) -> str:
        self.load_calls += 1
        if self.error is not None:
            raise self.error
        return self.text


class RecordingSink:
    """ResultSink that keeps every accepted result in arrival order."""

    name = "recording"

    def __init__(self, suppress_unavailable: bool = False) -> None:
        self.suppress_unavailable = suppress_unavailable
        self.results: List[Tuple[str, CheckOutcome]] = []

    async def emit(self, candidate: DomainCandidate, outcome: CheckOutcome) -> bool:
        if self.suppress_unavailable and outcome is not CheckOutcome.AVAILABLE:
            return False
        self.results.append((candidate.full, outcome))
        return True

    @property
    def domains(self) -> List[str]:
        return [domain for domain, _ in self.results]


def make_resolver(
    registered: Dict[str, List[str]],
    delays: Optional[Dict[str, float]] = None,
    error: Optional[Exception] = None,
) -> Callable[[str], Awaitable[List[str]]]:
    """
    Build a fake resolver.

    Hosts in `registered` resolve to their addresses; other hosts raise
    `error`, or ARES_ENOTFOUND when no error is given.
    """
    delays = delays or {}

    async def resolver(host: str) -> List[str]:
        await asyncio.sleep(delays.get(host, 0))
        if host in registered:
            return registered[host]
        if error is not None:
            raise error
        raise DNSError(ARES_ENOTFOUND, "Domain name not found")

    return resolver


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings fixture with test-specific overrides.
    """
    return Settings(
        startup_delay_seconds=0.0,
        lookup_timeout_seconds=1.0,
        check_concurrency=10,
        strict_lookup=False,
        log_level="DEBUG",
    )


@pytest.fixture
def plain_console() -> Console:
    """Uncolored console writing into a buffer (read via `console.file.getvalue()`)."""
    return Console(file=io.StringIO(), color_system=None, width=200, highlight=False)


@pytest.fixture
def tld_file(tmp_path: Path) -> Path:
    path = tmp_path / "tlds.txt"
    path.write_text(SAMPLE_TLD_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def iana_file(tmp_path: Path) -> Path:
    path = tmp_path / "tlds-alpha-by-domain.txt"
    path.write_text(IANA_STYLE_TEXT, encoding="utf-8")
    return path

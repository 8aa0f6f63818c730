"""
File result sink.

Appends one fully-qualified domain per line. The file is opened in append
mode for every write, so concurrent writes never truncate each other; their
relative order is unspecified.
"""

from __future__ import annotations

from pathlib import Path

import aiofiles

from tldscan.domain.models import CheckOutcome, DomainCandidate
from tldscan.errors import SinkWriteError
from tldscan.sinks.abstract import AbstractResultSink


class FileSink(AbstractResultSink):
    name: str = "file"

    def __init__(self, path: Path | str, suppress_unavailable: bool = False) -> None:
        super().__init__(suppress_unavailable=suppress_unavailable)
        self.path = Path(path)

    async def emit(self, candidate: DomainCandidate, outcome: CheckOutcome) -> bool:
        if not self.accepts(outcome):
            return False
        try:
            async with aiofiles.open(self.path, "a", encoding="utf-8") as f:
                await f.write(candidate.full + "\n")
        except OSError as exc:
            raise SinkWriteError(self.path, exc.strerror or str(exc)) from exc
        return True


__all__ = ["FileSink"]

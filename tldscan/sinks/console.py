"""
Console result sink.

Prints one colored line per result as soon as it arrives, so checked results
appear in completion order rather than list order.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text

from tldscan.domain.models import CheckOutcome, DomainCandidate
from tldscan.sinks.abstract import AbstractResultSink

# outcome -> (marker, style)
_MARKERS: dict[CheckOutcome, tuple[str, str]] = {
    CheckOutcome.AVAILABLE: ("+", "green"),
    CheckOutcome.UNAVAILABLE: ("-", "red"),
    CheckOutcome.ERROR: ("?", "yellow"),
    CheckOutcome.UNCHECKED: ("?", "yellow"),
}


def format_result(candidate: DomainCandidate, outcome: CheckOutcome, show_prefix: bool = True) -> Text:
    """Render `[+] example.com` style lines, or just the styled domain."""
    marker, style = _MARKERS[outcome]
    line = Text()
    if show_prefix:
        line.append("[", style="bright_black")
        line.append(marker, style=style)
        line.append("] ", style="bright_black")
    line.append(candidate.full, style=style)
    return line


class ConsoleSink(AbstractResultSink):
    name: str = "print"

    def __init__(
        self,
        console: Optional[Console] = None,
        suppress_unavailable: bool = False,
        show_prefix: bool = True,
    ) -> None:
        super().__init__(suppress_unavailable=suppress_unavailable)
        self.console = console or Console(highlight=False)
        self.show_prefix = show_prefix

    async def emit(self, candidate: DomainCandidate, outcome: CheckOutcome) -> bool:
        if not self.accepts(outcome):
            return False
        self.console.print(format_result(candidate, outcome, self.show_prefix))
        return True


__all__ = ["ConsoleSink", "format_result"]

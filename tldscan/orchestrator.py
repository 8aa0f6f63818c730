"""
Orchestrator for generating domain candidates and checking their availability.

Usage (example from CLI):
    from tldscan.domain.models import RunConfig
    from tldscan.orchestrator import run

    summary = run(RunConfig(sld="example", max_tld_length=3, check_availability=True))
    print(summary.available)

Each run moves through Loading -> Parsing -> Validating/Building ->
(Checking) -> Emitting. Loading and parsing finish before any candidate is
built. When checks are enabled every candidate gets its own task that emits
as soon as its lookup completes; all tasks are awaited before the run
returns. Without checks, candidates are emitted in source order.
"""

from __future__ import annotations

import asyncio
import time
from typing import Callable, Dict, List, Optional

from rich.console import Console

from tldscan.checker import AvailabilityChecker
from tldscan.config import Settings, get_settings
from tldscan.domain.models import CheckOutcome, DomainCandidate, RunConfig, RunSummary
from tldscan.domain.tlds import build_candidates, parse_tld_list
from tldscan.errors import SinkWriteError
from tldscan.reporter import announce_header, announce_source, announce_start
from tldscan.sinks import ConsoleSink, FileSink, ResultSink
from tldscan.sources import TldSource, resolve_source
from tldscan.utils.logging import get_logger

log = get_logger(__name__)


def _sink_factories(console: Console) -> Dict[str, Callable[[RunConfig], ResultSink]]:
    """Registry of output modes."""
    return {
        "print": lambda config: ConsoleSink(
            console,
            suppress_unavailable=config.suppress_unavailable,
            show_prefix=config.show_prefix,
        ),
        "file": lambda config: FileSink(
            config.output_file,
            suppress_unavailable=config.suppress_unavailable,
        ),
    }


def available_modes() -> List[str]:
    """List available output mode names."""
    return sorted(_sink_factories(Console()).keys())


def _resolve_sink(config: RunConfig, console: Console) -> ResultSink:
    factories = _sink_factories(console)
    if config.mode not in factories:
        raise ValueError(f"Unknown mode '{config.mode}'. Available: {', '.join(factories)}")
    return factories[config.mode](config)


async def _emit(
    sink: ResultSink, candidate: DomainCandidate, outcome: CheckOutcome, summary: RunSummary
) -> None:
    summary.record(outcome)
    try:
        written = await sink.emit(candidate, outcome)
    except SinkWriteError as exc:
        summary.write_failures += 1
        log.error(
            f"[WRITE FAILED] {candidate.full}",
            extra={"domain": candidate.full, "path": str(exc.path), "reason": exc.reason},
        )
        return
    if written:
        summary.emitted += 1


async def _check_and_emit(
    checker: AvailabilityChecker,
    sink: ResultSink,
    candidate: DomainCandidate,
    summary: RunSummary,
) -> None:
    outcome = await checker.check(candidate)
    await _emit(sink, candidate, outcome, summary)


async def run_pipeline(
    config: RunConfig,
    *,
    sink: Optional[ResultSink] = None,
    source: Optional[TldSource] = None,
    checker: Optional[AvailabilityChecker] = None,
    console: Optional[Console] = None,
    settings: Optional[Settings] = None,
) -> RunSummary:
    """
    Run one invocation end to end.

    Parameters
    ----------
    config : RunConfig
        Validated per-invocation options.
    sink, source, checker : optional
        Override the collaborators derived from `config` and `settings`.
    console : rich.console.Console | None
        Destination for progress lines and, in print mode, results.
    settings : Settings | None
        Process-level settings. Defaults to `get_settings()`.

    Returns
    -------
    RunSummary
        Counters for the run. Only returned once every check has finished.

    Raises
    ------
    SourceError
        If the TLD list cannot be loaded. Nothing is emitted in that case.
    """
    settings = settings or get_settings()
    console = console or Console(highlight=False)
    source = source or resolve_source(config, settings)
    sink = sink or _resolve_sink(config, console)

    summary = RunSummary()
    started = time.perf_counter()

    # Loading
    announce_source(console, source.location, is_file=source.name == "file")
    log.info(f"[SOURCE] {source.name}", extra={"source": source.name, "location": source.location})
    raw = await source.load()

    # Parsing
    tlds = parse_tld_list(raw)
    announce_header(console, tlds.header)
    announce_start(console, config.sld)

    # Validating/Building
    candidates = list(build_candidates(config.sld, tlds, config.max_tld_length))
    summary.candidates = len(candidates)
    log.info(
        f"[CANDIDATES] {len(candidates)} of {len(tlds)} TLD entries passed validation",
        extra={"candidates": len(candidates), "entries": len(tlds), "max": config.max_tld_length},
    )

    if settings.startup_delay_seconds:
        await asyncio.sleep(settings.startup_delay_seconds)

    if not config.check_availability:
        for candidate in candidates:
            await _emit(sink, candidate, CheckOutcome.UNCHECKED, summary)
    else:
        checker = checker or AvailabilityChecker(
            timeout=settings.lookup_timeout_seconds,
            concurrency=settings.check_concurrency,
            strict=settings.strict_lookup,
        )
        pending = {
            asyncio.create_task(_check_and_emit(checker, sink, candidate, summary))
            for candidate in candidates
        }
        log.debug("Checks scheduled", extra={"pending": len(pending)})
        await asyncio.gather(*pending)

    summary.duration_seconds = time.perf_counter() - started
    log.info(
        "[RUN COMPLETE]",
        extra={
            "candidates": summary.candidates,
            "available": summary.available,
            "unavailable": summary.unavailable,
            "errors": summary.errors,
            "emitted": summary.emitted,
            "write_failures": summary.write_failures,
            "duration": round(summary.duration_seconds, 2),
        },
    )
    return summary


def run(config: RunConfig, **kwargs) -> RunSummary:
    """
    Synchronous entry point around `run_pipeline`.

    Raises RuntimeError when called from inside a running event loop; await
    `run_pipeline` directly there instead.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(run_pipeline(config, **kwargs))
    raise RuntimeError("run() cannot be called from an async context; await run_pipeline()")


__all__ = [
    "available_modes",
    "run",
    "run_pipeline",
]

"""
Result sinks package for tldscan.

This module re-exports the sink interfaces and the concrete console and file
sinks so downstream code can import from `tldscan.sinks` directly.
"""

from tldscan.sinks.abstract import AbstractResultSink, ResultSink
from tldscan.sinks.console import ConsoleSink, format_result
from tldscan.sinks.file import FileSink

__all__ = [
    # Abstracts
    "AbstractResultSink",
    "ResultSink",
    # Concrete sinks
    "ConsoleSink",
    "FileSink",
    "format_result",
]

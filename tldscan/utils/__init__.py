"""
Utilities package for tldscan.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from tldscan.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]

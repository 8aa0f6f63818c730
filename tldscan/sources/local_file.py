"""
Local file TLD source.

Reads a line-delimited TLD list from disk. The file format matches the IANA
list, but no header is enforced: the first line is always treated as one.
"""

from __future__ import annotations

from pathlib import Path

import aiofiles

from tldscan.errors import SourceReadError
from tldscan.sources.abstract import AbstractTldSource
from tldscan.utils.logging import get_logger

log = get_logger(__name__)


class LocalFileSource(AbstractTldSource):
    """Read the whole TLD list file as UTF-8 text."""

    name: str = "file"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.location = str(self.path)

    async def load(self) -> str:
        log.debug("Reading TLD list file", extra={"path": self.location})
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8", newline="") as f:
                text = await f.read()
        except FileNotFoundError as exc:
            raise SourceReadError(self.location, "file does not exist") from exc
        except IsADirectoryError as exc:
            raise SourceReadError(self.location, "path is a directory") from exc
        except PermissionError as exc:
            raise SourceReadError(self.location, "permission denied") from exc
        except UnicodeDecodeError as exc:
            raise SourceReadError(self.location, "file is not valid UTF-8 text") from exc
        except OSError as exc:
            raise SourceReadError(self.location, exc.strerror or str(exc)) from exc

        log.debug("Read TLD list file", extra={"path": self.location, "chars": len(text)})
        return text


__all__ = ["LocalFileSource"]

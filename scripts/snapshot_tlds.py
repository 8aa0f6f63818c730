"""
Snapshot the remote TLD list to a local file.

The saved file can be passed to `tldscan print/file --list <file>` for
repeatable or offline runs. Entries can optionally be filtered with the same
rules the pipeline applies.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer

from tldscan.domain.tlds import parse_tld_list, validate_tld
from tldscan.errors import SourceError
from tldscan.sources.remote import RemoteSource

app = typer.Typer(help="Download the IANA TLD list into a local file.")


def _render_snapshot(text: str, max_length: Optional[int], valid_only: bool) -> str:
    """Keep the header line and, optionally, only the entries that would be used."""
    tlds = parse_tld_list(text)
    entries = [
        entry.strip()
        for entry in tlds
        if (validate_tld(entry, max_length) if valid_only else entry.strip())
    ]
    return "\n".join([tlds.header, *entries]) + "\n"


@app.command()
def main(
    output: Path = typer.Argument(Path("tlds.txt"), help="Destination file (overwritten)."),
    url: Optional[str] = typer.Option(None, "--url", help="Override the TLD list URL."),
    max_length: Optional[int] = typer.Option(None, "--max", "-m", min=0, help="Drop longer TLDs."),
    valid_only: bool = typer.Option(
        False, "--valid-only", help="Drop entries the pipeline would skip (blank, hyphenated, too long)."
    ),
) -> None:
    source = RemoteSource(url=url)
    try:
        text = asyncio.run(source.load())
    except SourceError as exc:
        typer.echo(f"Could not fetch {exc.location}: {exc.reason}", err=True)
        sys.exit(1)

    snapshot = _render_snapshot(text, max_length=max_length, valid_only=valid_only or max_length is not None)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(snapshot, encoding="utf-8")
    typer.echo(f"Wrote {len(snapshot.splitlines()) - 1} TLDs to {output}")


if __name__ == "__main__":
    app()

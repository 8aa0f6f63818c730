from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from tldscan import __version__
from tldscan.config import get_settings
from tldscan.domain.models import RunConfig
from tldscan.errors import SourceError
from tldscan.orchestrator import run
from tldscan.reporter import print_summary
from tldscan.utils.logging import configure_logging

EXIT_SOURCE_ERROR = 1
EXIT_USAGE_ERROR = 2


def _build_config(**fields: Any) -> RunConfig:
    try:
        return RunConfig(**fields)
    except ValidationError as exc:
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"]) or "options"
            typer.echo(f"Invalid {location}: {error['msg']}", err=True)
        raise typer.Exit(EXIT_USAGE_ERROR) from exc


def _execute(config: RunConfig) -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    try:
        summary = run(config, settings=settings)
    except SourceError as exc:
        typer.echo(f"Could not load TLD list from {exc.location}: {exc.reason}", err=True)
        raise typer.Exit(EXIT_SOURCE_ERROR) from exc
    print_summary(summary, config, console=Console(stderr=True))


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def build_app() -> typer.Typer:
    """
    Construct the CLI with its commands registered.

    Called once per process from `main`; nothing is registered at import time.
    """
    app = typer.Typer(help="Combine an SLD with every TLD and check which domains are free.")

    @app.callback()
    def root(
        version: bool = typer.Option(
            False,
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ) -> None:
        del version

    @app.command()
    def info() -> None:
        """
        Show effective configuration values.
        """
        settings = get_settings()
        typer.echo(
            f"list={settings.tld_list_url} | fetch_timeout={settings.fetch_timeout_seconds}s "
            f"lookup_timeout={settings.lookup_timeout_seconds}s "
            f"concurrency={settings.check_concurrency} strict={settings.strict_lookup} "
            f"startup_delay={settings.startup_delay_seconds}s log_level={settings.log_level}"
        )

    @app.command("print")
    def print_command(
        sld: str = typer.Argument(..., help="Second-level label, e.g. 'example'."),
        test: bool = typer.Option(False, "--test", "-t", help="Check whether each domain is available."),
        ignore_unavailable: bool = typer.Option(
            False, "--ignore-unavailable", "-i", help="Print only available domains (implies --test)."
        ),
        max_length: Optional[int] = typer.Option(
            None, "--max", "-m", min=0, help="Use only TLDs with no more than this many characters."
        ),
        list_file: Optional[Path] = typer.Option(
            None, "--list", "-l", help="Read TLDs from a local file instead of IANA."
        ),
        disable_prefix: bool = typer.Option(
            False, "--disable-prefix", "-d", help="Omit the [+]/[-]/[?] status prefix."
        ),
    ) -> None:
        """
        Print SLD combinations with all TLDs.
        """
        config = _build_config(
            mode="print",
            sld=sld,
            max_tld_length=max_length,
            list_file=list_file,
            check_availability=test,
            suppress_unavailable=ignore_unavailable,
            show_prefix=not disable_prefix,
        )
        _execute(config)

    @app.command("file")
    def file_command(
        sld: str = typer.Argument(..., help="Second-level label, e.g. 'example'."),
        file_name: Path = typer.Argument(..., metavar="FILENAME", help="File to append domains to."),
        ignore_unavailable: bool = typer.Option(
            False, "--ignore-unavailable", "-i", help="Write only available domains."
        ),
        max_length: Optional[int] = typer.Option(
            None, "--max", "-m", min=0, help="Use only TLDs with no more than this many characters."
        ),
        list_file: Optional[Path] = typer.Option(
            None, "--list", "-l", help="Read TLDs from a local file instead of IANA."
        ),
    ) -> None:
        """
        Write SLD combinations with all TLDs to a file.
        """
        config = _build_config(
            mode="file",
            sld=sld,
            max_tld_length=max_length,
            list_file=list_file,
            suppress_unavailable=ignore_unavailable,
            output_file=file_name,
        )
        _execute(config)

    return app


def main() -> None:
    app = build_app()
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()

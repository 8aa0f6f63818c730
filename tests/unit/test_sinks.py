from __future__ import annotations

from pathlib import Path

import pytest

from tldscan.domain.models import CheckOutcome, DomainCandidate
from tldscan.errors import SinkWriteError
from tldscan.sinks import ConsoleSink, FileSink, ResultSink, format_result

EXAMPLE_COM = DomainCandidate(sld="example", tld="com")
EXAMPLE_NET = DomainCandidate(sld="example", tld="net")


@pytest.mark.parametrize(
    ("outcome", "expected"),
    [
        (CheckOutcome.AVAILABLE, "[+] example.com"),
        (CheckOutcome.UNAVAILABLE, "[-] example.com"),
        (CheckOutcome.UNCHECKED, "[?] example.com"),
        (CheckOutcome.ERROR, "[?] example.com"),
    ],
)
def test_format_result_markers(outcome, expected):
    assert format_result(EXAMPLE_COM, outcome).plain == expected


def test_format_result_without_prefix():
    assert format_result(EXAMPLE_COM, CheckOutcome.AVAILABLE, show_prefix=False).plain == "example.com"


def test_format_result_colors_domain_by_outcome():
    line = format_result(EXAMPLE_COM, CheckOutcome.UNAVAILABLE, show_prefix=False)

    assert [span.style for span in line.spans] == ["red"]


@pytest.mark.asyncio
async def test_console_sink_prints_every_result(plain_console):
    sink = ConsoleSink(plain_console)

    assert await sink.emit(EXAMPLE_COM, CheckOutcome.UNAVAILABLE) is True
    assert await sink.emit(EXAMPLE_NET, CheckOutcome.AVAILABLE) is True

    assert plain_console.file.getvalue().splitlines() == ["[-] example.com", "[+] example.net"]
    assert isinstance(sink, ResultSink)


@pytest.mark.asyncio
async def test_console_sink_suppresses_unavailable(plain_console):
    sink = ConsoleSink(plain_console, suppress_unavailable=True, show_prefix=False)

    assert await sink.emit(EXAMPLE_COM, CheckOutcome.UNAVAILABLE) is False
    assert await sink.emit(EXAMPLE_NET, CheckOutcome.AVAILABLE) is True

    assert plain_console.file.getvalue().splitlines() == ["example.net"]


@pytest.mark.asyncio
async def test_file_sink_appends_lines(tmp_path: Path):
    path = tmp_path / "out.txt"
    path.write_text("existing.org\n", encoding="utf-8")
    sink = FileSink(path)

    await sink.emit(EXAMPLE_COM, CheckOutcome.UNCHECKED)
    await sink.emit(EXAMPLE_NET, CheckOutcome.UNAVAILABLE)

    assert path.read_text(encoding="utf-8") == "existing.org\nexample.com\nexample.net\n"


@pytest.mark.asyncio
async def test_file_sink_only_available_when_suppressing(tmp_path: Path):
    path = tmp_path / "out.txt"
    sink = FileSink(path, suppress_unavailable=True)

    assert await sink.emit(EXAMPLE_COM, CheckOutcome.UNAVAILABLE) is False
    assert await sink.emit(EXAMPLE_COM, CheckOutcome.ERROR) is False
    assert await sink.emit(EXAMPLE_NET, CheckOutcome.AVAILABLE) is True

    assert path.read_text(encoding="utf-8").splitlines() == ["example.net"]


@pytest.mark.asyncio
async def test_file_sink_unwritable_destination(tmp_path: Path):
    sink = FileSink(tmp_path / "missing-dir" / "out.txt")

    with pytest.raises(SinkWriteError) as excinfo:
        await sink.emit(EXAMPLE_COM, CheckOutcome.UNCHECKED)

    assert excinfo.value.path == tmp_path / "missing-dir" / "out.txt"

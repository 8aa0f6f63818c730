from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from tests.conftest import IANA_STYLE_TEXT
from tldscan.domain.models import RunConfig
from tldscan.errors import SourceFetchError, SourceReadError
from tldscan.sources import LocalFileSource, RemoteSource, TldSource, resolve_source

TEST_URL = "https://tlds.test/tlds-alpha-by-domain.txt"
NOT_FOUND = 404


def _transport(status: int = 200, text: str = IANA_STYLE_TEXT) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        return httpx.Response(status, text=text)

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_local_file_source_reads_whole_file(iana_file: Path):
    source = LocalFileSource(iana_file)

    assert await source.load() == IANA_STYLE_TEXT
    assert source.location == str(iana_file)
    assert isinstance(source, TldSource)


@pytest.mark.asyncio
async def test_local_file_source_keeps_line_endings(tmp_path: Path):
    path = tmp_path / "mixed.txt"
    path.write_bytes(b"#header\rcom\r\nnet\nio\r")

    assert await LocalFileSource(path).load() == "#header\rcom\r\nnet\nio\r"


@pytest.mark.asyncio
async def test_local_file_source_missing_file(tmp_path: Path):
    source = LocalFileSource(tmp_path / "missing.txt")

    with pytest.raises(SourceReadError, match="does not exist"):
        await source.load()


@pytest.mark.asyncio
async def test_local_file_source_directory(tmp_path: Path):
    with pytest.raises(SourceReadError):
        await LocalFileSource(tmp_path).load()


@pytest.mark.asyncio
async def test_local_file_source_rejects_non_utf8(tmp_path: Path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"#h\ncom\n\xff\xfe\n")

    with pytest.raises(SourceReadError, match="UTF-8"):
        await LocalFileSource(path).load()


@pytest.mark.asyncio
async def test_remote_source_returns_body():
    source = RemoteSource(url=TEST_URL, timeout=1.0, transport=_transport())

    assert await source.load() == IANA_STYLE_TEXT
    assert source.location == TEST_URL


@pytest.mark.asyncio
async def test_remote_source_non_success_status():
    source = RemoteSource(url=TEST_URL, timeout=1.0, transport=_transport(status=NOT_FOUND))

    with pytest.raises(SourceFetchError) as excinfo:
        await source.load()

    assert excinfo.value.status_code == NOT_FOUND
    assert "404" in excinfo.value.reason


@pytest.mark.asyncio
async def test_remote_source_network_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    source = RemoteSource(url=TEST_URL, timeout=1.0, transport=httpx.MockTransport(handler))

    with pytest.raises(SourceFetchError) as excinfo:
        await source.load()

    assert excinfo.value.status_code is None


def test_resolve_source_prefers_local_file(test_settings, iana_file: Path):
    source = resolve_source(RunConfig(sld="example", list_file=iana_file), test_settings)

    assert isinstance(source, LocalFileSource)


def test_resolve_source_defaults_to_remote_list(test_settings):
    source = resolve_source(RunConfig(sld="example"), test_settings)

    assert isinstance(source, RemoteSource)
    assert source.url == "https://data.iana.org/TLD/tlds-alpha-by-domain.txt"

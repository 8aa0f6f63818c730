"""
Remote TLD source.

Fetches the IANA TLD list (or any URL serving the same format) over HTTP with
httpx. A single attempt is made; failures abort the run.
"""

from __future__ import annotations

from typing import Optional

import httpx

from tldscan.config import get_settings
from tldscan.errors import SourceFetchError
from tldscan.sources.abstract import AbstractTldSource
from tldscan.utils.logging import get_logger

log = get_logger(__name__)


class RemoteSource(AbstractTldSource):
    """
    Download the TLD list with a GET request.

    `transport` lets tests substitute an `httpx.MockTransport`.
    """

    name: str = "remote"

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.url = url or settings.tld_list_url
        self.timeout = timeout or settings.fetch_timeout_seconds
        self.location = self.url
        self._transport = transport

    async def load(self) -> str:
        log.debug("Fetching TLD list", extra={"url": self.url, "timeout": self.timeout})
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise SourceFetchError(
                self.url, f"server responded with HTTP {status}", status_code=status
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceFetchError(self.url, f"request failed: {exc}") from exc

        log.debug(
            "Fetched TLD list",
            extra={"url": self.url, "status": response.status_code, "bytes": len(response.content)},
        )
        return response.text


__all__ = ["RemoteSource"]

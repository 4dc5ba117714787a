from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

import httpx

from staticdocs.domain.errors import NotFound, TransportError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HttpFileLoader:
    """
    Fetches documents over HTTP from base_url/root/lang/filename.

    404 is NotFound; every other failure (non-2xx status, connection error,
    timeout) is a TransportError. Pass a client to share a connection pool or
    to plug in a mock transport; otherwise one is created and owned here.
    """
    base_url: str
    timeout: float = 10.0
    client: Optional[httpx.AsyncClient] = None
    _owns_client: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.client is None:
            self.client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True

    def url_for(self, root: str, lang: str, filename: str) -> str:
        parts = [p.strip("/") for p in (root, lang, filename) if p and p.strip("/")]
        return "/".join([self.base_url.rstrip("/"), *parts])

    async def load(self, root: str, lang: str, filename: str) -> str:
        url = self.url_for(root, lang, filename)
        logger.debug("GET %s", url)

        try:
            response = await self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"GET {url} failed: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFound(f"No such document: {url}")
        if response.is_error:
            raise TransportError(f"GET {url} returned {response.status_code}")

        return response.text

    async def aclose(self) -> None:
        if self._owns_client and self.client is not None:
            await self.client.aclose()

    async def __aenter__(self) -> HttpFileLoader:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

"""Page fetcher used by the dictionary service."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from app.config import settings
from app.services.dictionary.base import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResponse:
    status: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status == 200


class PageFetcher(Protocol):
    """Fetches a page; raises FetchError on network failure or timeout."""

    async def fetch(self, url: str) -> FetchResponse: ...

    async def close(self) -> None: ...


class HttpxPageFetcher:
    """PageFetcher backed by a shared httpx.AsyncClient.

    Any HTTP status is returned to the caller; only transport failures raise.
    """

    def __init__(
        self,
        user_agent: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.user_agent = user_agent or settings.http_user_agent
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self._client = httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
            transport=transport,
        )

    async def fetch(self, url: str) -> FetchResponse:
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            logger.warning(f"Timed out after {self.timeout}s fetching {url}")
            raise FetchError(url, "timeout") from e
        except httpx.HTTPError as e:
            logger.warning(f"HTTP error fetching {url}: {e}")
            raise FetchError(url, str(e) or type(e).__name__) from e

        return FetchResponse(status=response.status_code, body=response.text)

    async def close(self) -> None:
        await self._client.aclose()

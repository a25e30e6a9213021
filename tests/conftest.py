"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import app
from app.routes.dictionary import get_dictionary_service
from app.services.dictionary import DictionaryService, FetchResponse, TTLCache

DICTIONARY_URL = "https://www.oxfordlearnersdictionaries.com/definition/english/run"
INFLECTION_URL = "https://simple.wiktionary.org/wiki/run"

RUN_PAGE = """
<html><body>
<div class="entry" data-src="oald10" id="run_1">
  <div class="top-container">
    <div class="webtop" id="run_topg_1">
      <h1 class="headword">run</h1>
      <span class="pos">verb</span>
    </div>
  </div>
  <div class="pos-header">
    <span class="pos">verb</span>
    <div class="phonetics">
      <span class="geo">BrE</span>
      <span class="phon">/rʌn/</span>
      <audio><source src="/media/english/uk_pron/r/run/run__/run__gb_1.mp3" type="audio/mpeg"></audio>
    </div>
    <div class="phonetics">
      <span class="geo">NAmE</span>
      <span class="phon">/rʌn/</span>
    </div>
  </div>
  <ol class="senses_multiple">
    <li class="sense">
      <span class="def">to move using your legs, going faster than when you walk</span>
      <ul class="examples">
        <li class="x-g"><span class="x">Can you run as fast as Mike?</span></li>
      </ul>
    </li>
    <li class="sense">
      <span class="def">to be in charge of a business, etc.</span>
      <ul class="examples">
        <li><span class="x">She runs&nbsp;a  restaurant.</span></li>
      </ul>
    </li>
  </ol>
</div>
</body></html>
"""

RUN_INFLECTIONS = """
<html><body>
<table class="inflection-table">
  <tr>
    <td><p>present tense
runs</p></td>
    <td><p><b>past tense</b><br>ran</p></td>
    <td>no paragraph here</td>
    <td><p>participle</p></td>
    <td><p>   </p></td>
  </tr>
</table>
</body></html>
"""


class FakeClock:
    """Manually advanced clock for cache tests."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """In-memory PageFetcher returning preconfigured pages or errors."""

    def __init__(
        self,
        pages: dict[str, FetchResponse | Exception] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.pages = pages or {}
        self.delay = delay
        self.calls: list[str] = []
        self.closed = False

    async def fetch(self, url: str) -> FetchResponse:
        self.calls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        result = self.pages.get(url, FetchResponse(status=404, body="<html></html>"))
        if isinstance(result, Exception):
            raise result
        return result

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def test_settings() -> Settings:
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> TTLCache:
    return TTLCache(ttl_seconds=1800, max_entries=1000, clock=clock)


@pytest.fixture
def fetcher() -> FakeFetcher:
    """Fetcher serving the 'run' entry and inflection pages."""
    return FakeFetcher(
        {
            DICTIONARY_URL: FetchResponse(status=200, body=RUN_PAGE),
            INFLECTION_URL: FetchResponse(status=200, body=RUN_INFLECTIONS),
        }
    )


@pytest.fixture
def service(fetcher: FakeFetcher, cache: TTLCache, test_settings: Settings) -> DictionaryService:
    return DictionaryService(fetcher=fetcher, cache=cache, config=test_settings)


@pytest.fixture
def test_app(service: DictionaryService) -> FastAPI:
    """FastAPI application wired to the fake-backed service."""
    app.dependency_overrides[get_dictionary_service] = lambda: service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def run_page() -> str:
    """Oxford entry page for 'run': one POS, two phonetics blocks, two senses."""
    return RUN_PAGE


@pytest.fixture
def run_inflections() -> str:
    """Wiktionary inflection table with one newline cell and one <br> cell."""
    return RUN_INFLECTIONS


@pytest.fixture
def fake_fetcher_cls() -> type[FakeFetcher]:
    return FakeFetcher


@pytest.fixture
def urls() -> dict[str, str]:
    return {"dictionary": DICTIONARY_URL, "inflection": INFLECTION_URL}

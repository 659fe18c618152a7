from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Type

import httpx
from loguru import logger
from pydantic import ValidationError

from src.config.settings import settings
from src.models.enums import SourceKind
from src.models.records import SourceRecord
from src.models.vexdb import VexDBEntry, VexDBResponse
from src.utils.misc_utils import gather_or_cancel


class ScraperError(Exception):
    """Custom exception for scraper-related errors."""

    pass


class ResponseFormatError(ScraperError):
    """Exception raised when an upstream body does not have the expected shape."""

    pass


def create_http_client(timeout: Optional[float] = None, **kwargs) -> httpx.AsyncClient:
    """Builds the AsyncClient shared by every scraper within one pipeline run."""
    if timeout is None:
        timeout = settings.request_timeout
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={
            "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        },
        **kwargs,
    )


class BaseScraper:
    """Holds the HTTP client and the request helper shared by all scrapers."""

    source_name: str = "unknown"

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._owns_client = client is None
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """The injected client, or one created on first use."""
        if self._client is None:
            self._client = create_http_client()
        return self._client

    async def _make_request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        **kwargs,
    ) -> httpx.Response:
        """Makes an asynchronous HTTP request; failures surface as ScraperError."""
        logger.debug("Making request", method=method, url=url, params=params)
        try:
            response = await self.client.request(method, url, params=params, **kwargs)
            response.raise_for_status()  # Raises HTTPStatusError for 4xx/5xx
            logger.debug(f"Request successful: {response.status_code} for {url}")
            return response

        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error during request for {self.source_name}: {e.response.status_code} - {e}"
            )
            raise ScraperError(f"HTTP error: {e.response.status_code}") from e
        except httpx.RequestError as e:
            # Network errors, timeouts etc.
            logger.error(f"Request error for {self.source_name} at {url}: {e!r}")
            raise ScraperError(f"Request to {url} failed: {e!r}") from e

    async def close(self):
        """Closes the underlying HTTP client if this scraper created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            logger.debug(f"Closed HTTP client for {self.source_name}")


class StatsScraper(BaseScraper, ABC):
    """Base class for the per-team VexDB statistics fetchers.

    Subclasses name the endpoint, the entry model it returns and how a list of
    entries is reduced into one SourceRecord. ``fetch`` issues one request per
    team, all at once, and fails as a whole if any single team fails.
    """

    kind: SourceKind
    endpoint: str
    entry_model: Type[VexDBEntry]

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        season: Optional[str] = None,
    ):
        super().__init__(client)
        self.base_url = (base_url or settings.vexdb_api_url).rstrip("/")
        self.season = season or settings.season

    @property
    def source_name(self) -> str:  # type: ignore[override]
        return f"VexDB {self.endpoint}"

    @abstractmethod
    def query_params(self, team: str) -> Dict[str, Any]:
        """Query string for the team's request."""

    @abstractmethod
    def summarize(self, team: str, entries: List[Any]) -> SourceRecord:
        """Reduces the team's result entries into one record."""

    async def fetch_entries(self, team: str) -> List[Any]:
        url = f"{self.base_url}/{self.endpoint}"
        response = await self._make_request(
            method="GET", url=url, params=self.query_params(team)
        )
        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"Non-JSON {self.endpoint} body for team {team}: {e}")
            raise ResponseFormatError(
                f"Malformed {self.endpoint} response for team {team}"
            ) from e
        try:
            payload = VexDBResponse[self.entry_model].model_validate(body)
        except ValidationError as e:
            logger.error(
                f"Unexpected {self.endpoint} payload for team {team}: {e.error_count()} errors"
            )
            logger.debug(f"Raw {self.endpoint} response content: {response.text}")
            raise ResponseFormatError(
                f"Malformed {self.endpoint} response for team {team}"
            ) from e
        logger.debug(f"{self.endpoint}: {len(payload.result)} entries for {team}")
        return payload.result

    async def fetch_team(self, team: str) -> SourceRecord:
        entries = await self.fetch_entries(team)
        return self.summarize(team, entries)

    async def fetch(self, teams: Sequence[str]) -> List[SourceRecord]:
        """Fetch and summarize statistics for every team concurrently."""
        logger.info(f"Fetching {self.kind.value} for {len(teams)} teams")
        # The first failing team fails the whole batch
        records = await gather_or_cancel(*(self.fetch_team(team) for team in teams))
        logger.info(
            f"Finished fetching {self.kind.value}. Returning {len(records)} records."
        )
        return list(records)

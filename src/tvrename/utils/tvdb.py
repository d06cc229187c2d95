"""
TheTVDB v4 API client for series and episode lookup.

The client logs in once per instance with the API key (and optional
subscriber PIN) and reuses the bearer token for every later request. Every
successful response is written to a JSON file under the cache directory and
served from there on the next run; cached files are never refreshed, delete
the cache directory to force a new download.
"""
import json
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests

from tvrename.models import EpisodeRecord
from tvrename.utils import constants, logger
from tvrename.utils.logger import LogLevel


class TVDBError(Exception):
    """Base exception for TheTVDB API errors."""

    pass


class TVDBAuthError(TVDBError):
    """Exception for failed logins."""

    pass


class TVDBAPIError(TVDBError):
    """Exception for API request failures."""

    pass


@dataclass(frozen=True)
class SearchResult:
    tvdb_id: str
    name: str
    year: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.name} ({self.year})" if self.year else self.name


@dataclass(frozen=True)
class Series:
    id: int
    name: str
    year: Optional[str] = None
    slug: Optional[str] = None


def sort_episodes(episodes: List[EpisodeRecord]) -> List[EpisodeRecord]:
    """
    Sort episodes into canonical order.

    Seasons ascend, except season 0 (specials) which goes after every other
    season. Episode numbers ascend within a season.
    """
    return sorted(episodes, key=lambda e: (e.season_number == 0, e.season_number, e.number))


def _episode_from_json(data: Dict[str, Any]) -> EpisodeRecord:
    return EpisodeRecord(
        id=data.get("id"),
        season_number=data.get("seasonNumber") or 0,
        number=data.get("number") or 0,
        name=data.get("name"),
    )


class TVDBClient:
    """Client for interacting with TheTVDB API."""

    def __init__(
            self,
            api_key: Optional[str] = None,
            pin: Optional[str] = None,
            base_url: str = constants.TVDB_BASE_URL,
            cache_dir: str | Path = constants.CACHE_DIR,
            page_delay: float = constants.TVDB_PAGE_DELAY,
    ):
        """Initialize the client; no request is made until the first lookup."""
        self.api_key = api_key or constants.TVDB_API_KEY
        if not self.api_key:
            raise TVDBError("TheTVDB API key is required. Set TVDB_API_KEY environment variable.")

        self.pin = pin or constants.TVDB_PIN
        self.base_url = base_url.rstrip("/")
        self.cache_dir = Path(cache_dir)
        self.page_delay = page_delay
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self._token: Optional[str] = None

    # ---- transport -------------------------------------------------------

    def _parse_body(self, response: requests.Response, error_context: str) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError as e:
            raise TVDBAPIError(f"Error {error_context}: invalid JSON response: {e}")

        if not response.ok or body.get("status") != "success" or body.get("data") is None:
            raise TVDBAPIError(
                f"Error {error_context}: {response.status_code} {response.reason} - "
                f"{body.get('message') or 'Unknown error'}"
            )
        return body

    def login(self) -> str:
        """Exchange the API key (and PIN) for a bearer token."""
        payload = {"apikey": self.api_key}
        if self.pin:
            payload["pin"] = self.pin

        logger.log("tvdb.login", LogLevel.DEBUG, url=f"{self.base_url}/login")
        try:
            response = self.session.post(f"{self.base_url}/login", json=payload, timeout=constants.TVDB_TIMEOUT)
        except requests.exceptions.RequestException as e:
            raise TVDBAuthError(f"Login request failed: {e}")

        try:
            body = self._parse_body(response, "logging in")
        except TVDBAPIError as e:
            raise TVDBAuthError(str(e))

        token = body["data"].get("token")
        if not token:
            raise TVDBAuthError("Error logging in: no token in response")
        return token

    @property
    def token(self) -> str:
        if not self._token:
            self._token = self.login()
        return self._token

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]], error_context: str) -> Dict[str, Any]:
        """Make an authenticated GET request and return the full response body."""
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        headers = {"Authorization": f"Bearer {self.token}"}

        logger.log("tvdb.request", LogLevel.DEBUG, url=url, params=json.dumps(params or {}))
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=constants.TVDB_TIMEOUT)
        except requests.exceptions.RequestException as e:
            raise TVDBAPIError(f"Error {error_context}: request failed: {e}")
        return self._parse_body(response, error_context)

    # ---- cache -----------------------------------------------------------

    def _cache_path(self, name: str) -> Path:
        return self.cache_dir / name

    def _read_cache(self, name: str) -> Any:
        path = self._cache_path(name)
        if not path.exists():
            return None
        logger.log("tvdb.cache.hit", LogLevel.TRACE, file=str(path))
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except ValueError as e:
            raise TVDBAPIError(f"Corrupt cache file {path}: {e}")

    def _write_cache(self, name: str, data: Any) -> None:
        path = self._cache_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        tmp.replace(path)

    # ---- lookups ---------------------------------------------------------

    def search(self, query: str, type: str = "series", limit: int = constants.TVDB_SEARCH_LIMIT) -> List[SearchResult]:
        """Search TheTVDB; results come back in the API's relevance order."""
        params = {"query": query, "type": type, "limit": limit}
        cache_name = "search." + re.sub(r"[^a-zA-Z0-9]", "", f"query{query}type{type}limit{limit}") + ".json"

        data = self._read_cache(cache_name)
        if data is None:
            logger.log("tvdb.search", LogLevel.INFO, query=query, type=type)
            data = self._make_request("search", params, f"searching '{query}'")["data"]
            self._write_cache(cache_name, data)

        return [
            SearchResult(tvdb_id=str(r.get("tvdb_id") or r.get("id")), name=r.get("name"), year=r.get("year"))
            for r in data
        ]

    def get_series(self, series_id: int | str) -> Series:
        """Get the base record of a series."""
        cache_name = f"series.{series_id}.json"
        data = self._read_cache(cache_name)
        if data is None:
            data = self._make_request(f"series/{series_id}", None, f"fetching series {series_id}")["data"]
            self._write_cache(cache_name, data)
        return Series(id=data["id"], name=data["name"], year=data.get("year"), slug=data.get("slug"))

    def get_series_episodes_page(self, series_id: int | str, page: int) -> List[EpisodeRecord]:
        """Get one page of a series' episodes in default (aired) order."""
        cache_name = f"series.{series_id}.page-{page}.episodes.json"
        data = self._read_cache(cache_name)
        if data is None:
            data = self._make_request(
                f"series/{series_id}/episodes/default",
                {"page": page},
                f"fetching episodes of series {series_id} (page {page})",
            )["data"]
            self._write_cache(cache_name, data)
        return [_episode_from_json(e) for e in data.get("episodes") or []]

    def get_series_episodes(self, series_id: int | str) -> List[EpisodeRecord]:
        """
        Get every episode of a series in canonical order.

        Pages are requested from 0 until an empty page comes back, pausing
        `page_delay` seconds between requests.
        """
        cache_name = f"series.{series_id}.episodes.json"
        data = self._read_cache(cache_name)
        if data is not None:
            return [_episode_from_json(e) for e in data]

        episodes: List[EpisodeRecord] = []
        page = 0
        while True:
            page_episodes = self.get_series_episodes_page(series_id, page)
            if not page_episodes:
                break
            episodes.extend(page_episodes)
            page += 1
            if self.page_delay:
                time.sleep(self.page_delay)

        episodes = sort_episodes(episodes)
        logger.log("tvdb.episodes", LogLevel.INFO, series_id=series_id, episodes=len(episodes), pages=page)
        self._write_cache(
            cache_name,
            [{"id": e.id, "seasonNumber": e.season_number, "number": e.number, "name": e.name} for e in episodes],
        )
        return episodes

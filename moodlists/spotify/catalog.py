from typing import Any, Dict, List, Optional

import requests

from moodlists.config import (
    DEFAULT_SEARCH_LIMIT,
    SPOTIFY_API_BASE,
    SPOTIFY_MARKET,
    SPOTIFY_REQUEST_TIMEOUT,
)
from moodlists.core import (
    Credential,
    UpstreamError,
    ValidationError,
    log_error,
)

from .auth import spotify_headers

SEARCH_TYPES = ("artist", "track")


class SpotifyCatalog:
    """
    Read-only access to the Spotify Web API catalog endpoints.

    Every call takes the credential explicitly; this class never refreshes
    tokens itself. Transport failures, non-2xx answers and malformed payloads
    all surface as UpstreamError.
    """

    def __init__(
        self,
        api_base: str = SPOTIFY_API_BASE,
        market: str = SPOTIFY_MARKET,
        timeout: float = SPOTIFY_REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.market = market
        self.timeout = timeout
        self._http = session if session is not None else requests.Session()

    def _get(
        self,
        path: str,
        credential: Credential,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.api_base}{path}"
        try:
            r = self._http.get(
                url,
                headers=spotify_headers(credential),
                params=params,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            log_error(f"Spotify request to {path} failed: {exc}")
            raise UpstreamError(f"Spotify request failed: {exc}") from exc

        if not r.ok:
            log_error(f"Spotify API error on {path}: {r.status_code} {r.text[:200]}")
            raise UpstreamError(
                f"Spotify API returned {r.status_code} for {path}",
                status_code=r.status_code,
            )

        try:
            data = r.json()
        except ValueError as exc:
            raise UpstreamError(f"Spotify returned invalid JSON for {path}") from exc
        if not isinstance(data, dict):
            raise UpstreamError(f"Spotify returned an unexpected payload for {path}")
        return data

    def search(
        self,
        item_type: str,
        query: str,
        credential: Credential,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> List[Dict[str, Any]]:
        """
        Search artists or tracks; returns the raw `items` list in the
        provider's ranking order.
        """
        if item_type not in SEARCH_TYPES:
            raise ValidationError(
                "type", f"Unsupported search type {item_type!r}; use one of {SEARCH_TYPES}"
            )

        data = self._get(
            "/search",
            credential,
            params={"q": query, "type": item_type, "limit": limit},
        )
        try:
            items = data[f"{item_type}s"]["items"]
        except (KeyError, TypeError) as exc:
            raise UpstreamError(f"Malformed {item_type} search payload") from exc
        if not isinstance(items, list):
            raise UpstreamError(f"Malformed {item_type} search payload")
        return items

    def get_artist_top_tracks(
        self,
        artist_id: str,
        credential: Credential,
        market: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Single, non-paginated call; order is the provider's top-tracks order.
        """
        data = self._get(
            f"/artists/{artist_id}/top-tracks",
            credential,
            params={"market": market or self.market},
        )
        tracks = data.get("tracks")
        if not isinstance(tracks, list):
            raise UpstreamError("Malformed top-tracks payload")
        return tracks

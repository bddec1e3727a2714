from typing import Any, Dict, List, Optional

import pytest

from moodlists.core import Credential, UpstreamError
from moodlists.spotify import CredentialBroker


def make_raw_track(index: int) -> Dict[str, Any]:
    """Minimal Spotify track object as returned by /artists/{id}/top-tracks."""
    return {
        "id": f"track{index}",
        "name": f"Song {index}",
        "artists": [
            {"id": "artist1", "name": "Elton John"},
            {"id": "artist2", "name": f"Guest {index}"},
        ],
        "album": {
            "id": f"album{index}",
            "name": f"Album {index}",
            "images": [
                {"url": f"https://img/{index}/640", "height": 640, "width": 640},
                {"url": f"https://img/{index}/300", "height": 300, "width": 300},
            ],
        },
        "duration_ms": 200000 + index,
        "preview_url": None if index % 2 else f"https://preview/{index}",
        "external_urls": {"spotify": f"https://open.spotify.com/track/track{index}"},
        "popularity": 90 - index,
    }


class FakeCatalog:
    """
    In-memory stand-in for SpotifyCatalog that records every call.
    """

    def __init__(
        self,
        artists: Optional[Dict[str, str]] = None,
        top_tracks: Optional[Dict[str, List[Dict[str, Any]]]] = None,
    ):
        self.artists = artists if artists is not None else {
            "Elton John": "elton",
            "Crush 40": "crush40",
            "TheFatRat": "fatrat",
        }
        self.top_tracks = top_tracks if top_tracks is not None else {
            artist_id: [make_raw_track(i) for i in range(5)]
            for artist_id in self.artists.values()
        }
        self.search_calls: List[tuple] = []
        self.top_tracks_calls: List[tuple] = []
        self.fail_top_tracks: Optional[Exception] = None

    def search(self, item_type: str, query: str, credential: Credential, limit: int = 20):
        self.search_calls.append((item_type, query, credential.token, limit))
        if item_type == "artist":
            artist_id = self.artists.get(query)
            return [{"id": artist_id, "name": query}] if artist_id else []
        return [make_raw_track(i) for i in range(limit)]

    def get_artist_top_tracks(self, artist_id: str, credential: Credential, market=None):
        self.top_tracks_calls.append((artist_id, credential.token))
        if self.fail_top_tracks is not None:
            raise self.fail_top_tracks
        if artist_id not in self.top_tracks:
            raise UpstreamError("Spotify API returned 404", status_code=404)
        return list(self.top_tracks[artist_id])


class CountingIssuer:
    def __init__(self, ttl: float = 3600.0):
        self.calls = 0
        self.ttl = ttl

    def __call__(self):
        self.calls += 1
        return f"token-{self.calls}", self.ttl


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def issuer() -> CountingIssuer:
    return CountingIssuer()


@pytest.fixture
def broker(issuer: CountingIssuer) -> CredentialBroker:
    return CredentialBroker(issuer)

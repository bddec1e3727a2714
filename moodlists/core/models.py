from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from moodlists.config import DEFAULT_PLAYLIST_LENGTH


@dataclass(frozen=True)
class Credential:
    """
    Client-credentials access token and its absolute expiry (epoch seconds).

    Frozen so that token and expiry are always replaced together.
    """

    token: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


@dataclass(frozen=True)
class Track:
    id: str
    name: str
    artists: List[str]
    album: str
    duration_ms: Optional[int] = None
    preview_url: Optional[str] = None
    external_urls: Dict[str, str] = field(default_factory=dict)
    images: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class Playlist:
    """
    Assembled playlist, returned to the caller and never mutated.

    total_tracks is derived from the track tuple so it cannot drift from it.
    """

    emotion: str
    artist: str
    tracks: Tuple[Track, ...] = ()

    @property
    def total_tracks(self) -> int:
        return len(self.tracks)


class UserProfile(BaseModel):
    """
    Persisted user profile.

    - id              : caller-supplied, unique across the store
    - playlist_length : preferred playlist size, positive integer
    Extra preference fields (e.g. favorite_genre) are kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    playlist_length: int = Field(default=DEFAULT_PLAYLIST_LENGTH, gt=0, strict=True)

from dataclasses import asdict
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from moodlists.core import Playlist


class EmotionInfo(BaseModel):
    emotion: str
    artist: str


class EmotionListResponse(BaseModel):
    emotions: List[EmotionInfo]


class EmotionPlaylistRequest(BaseModel):
    emotion: Optional[str] = None
    user_id: Optional[str] = None


class TrackResponse(BaseModel):
    id: str
    name: str
    artists: List[str]
    album: str
    duration_ms: Optional[int] = None
    preview_url: Optional[str] = None
    external_urls: Dict[str, str] = {}
    images: List[Dict[str, Any]] = []


class PlaylistResponse(BaseModel):
    emotion: str
    artist: str
    tracks: List[TrackResponse]
    total_tracks: int

    @classmethod
    def from_playlist(cls, playlist: Playlist) -> "PlaylistResponse":
        return cls(
            emotion=playlist.emotion,
            artist=playlist.artist,
            tracks=[TrackResponse(**asdict(t)) for t in playlist.tracks],
            total_tracks=playlist.total_tracks,
        )

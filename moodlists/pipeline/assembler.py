"""Emotion -> artist -> top tracks playlist assembly.

The assembler is stateless per call and knows nothing about users: callers
resolve a preferred length (e.g. from the PreferenceStore) before calling
assemble(). Steps:

  1. normalise the emotion and map it to an artist (no network on failure)
  2. get a valid credential from the broker
  3. resolve the artist id through the ResolutionCache
  4. fetch the artist's top tracks (one call, provider order kept)
  5. keep the first `requested_length` tracks and shape them into Track
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from moodlists.core import (
    EMOTION_ARTISTS,
    Emotion,
    Playlist,
    Track,
    UpstreamError,
    log_step,
    log_success,
)
from moodlists.spotify import CredentialBroker, ResolutionCache, SpotifyCatalog


def shape_track(raw: Dict[str, Any]) -> Track:
    """
    Reduce a raw Spotify track object to the Track fields.

    Artists become names, the album becomes its name and the album cover
    images are passed through unchanged.
    """
    try:
        album = raw.get("album") or {}
        return Track(
            id=raw["id"],
            name=raw["name"],
            artists=[a["name"] for a in raw.get("artists") or []],
            album=album.get("name", ""),
            duration_ms=raw.get("duration_ms"),
            preview_url=raw.get("preview_url"),
            external_urls=dict(raw.get("external_urls") or {}),
            images=list(album.get("images") or []),
        )
    except (AttributeError, KeyError, TypeError) as exc:
        raise UpstreamError(f"Malformed track payload from Spotify: {exc}") from exc


class PlaylistAssembler:
    def __init__(
        self,
        broker: CredentialBroker,
        resolver: ResolutionCache,
        catalog: SpotifyCatalog,
        emotion_artists: Mapping[Emotion, str] = EMOTION_ARTISTS,
    ):
        self._broker = broker
        self._resolver = resolver
        self._catalog = catalog
        self._emotion_artists = emotion_artists

    def artist_for(self, emotion: str) -> str:
        return self._emotion_artists[Emotion.parse(emotion)]

    def available_emotions(self) -> List[Tuple[str, str]]:
        """(emotion, artist) pairs in Emotion declaration order."""
        return [(e.value, self._emotion_artists[e]) for e in Emotion]

    def assemble(
        self,
        emotion: str,
        requested_length: int,
        user_id: Optional[str] = None,
    ) -> Playlist:
        category = Emotion.parse(emotion)
        artist_name = self._emotion_artists[category]
        log_step(
            f"Generating {category.value} playlist using {artist_name} "
            f"({requested_length} tracks requested"
            + (f", user {user_id}" if user_id else "")
            + ")..."
        )

        credential = self._broker.get_valid_credential()
        artist_id = self._resolver.resolve(artist_name, credential)
        raw_tracks = self._catalog.get_artist_top_tracks(artist_id, credential)

        kept = raw_tracks[: max(0, requested_length)]
        playlist = Playlist(
            emotion=category.value,
            artist=artist_name,
            tracks=tuple(shape_track(t) for t in kept),
        )
        log_success(
            f"{category.value} playlist ready: {playlist.total_tracks} tracks "
            f"({len(raw_tracks)} available)."
        )
        return playlist

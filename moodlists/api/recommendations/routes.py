from fastapi import APIRouter, Depends

from moodlists.api.dependencies import get_assembler, get_preference_store
from moodlists.api.errors import raise_http_error
from moodlists.config import DEFAULT_PLAYLIST_LENGTH
from moodlists.core import MoodlistsError, ValidationError, log_warning
from moodlists.data import PreferenceStore
from moodlists.pipeline import PlaylistAssembler

from .schemas import (
    EmotionInfo,
    EmotionListResponse,
    EmotionPlaylistRequest,
    PlaylistResponse,
)

router = APIRouter()


@router.get("/emotions", response_model=EmotionListResponse)
def list_emotions(
    assembler: PlaylistAssembler = Depends(get_assembler),
) -> EmotionListResponse:
    """
    Available emotions with the artist each one maps to.
    """
    return EmotionListResponse(
        emotions=[
            EmotionInfo(emotion=emotion, artist=artist)
            for emotion, artist in assembler.available_emotions()
        ]
    )


@router.post("/emotion", response_model=PlaylistResponse)
def generate_playlist(
    body: EmotionPlaylistRequest,
    assembler: PlaylistAssembler = Depends(get_assembler),
    store: PreferenceStore = Depends(get_preference_store),
) -> PlaylistResponse:
    """
    Build a playlist for an emotion.

    When user_id names a known profile, its playlist_length replaces the
    default length; unknown ids fall back to the default.
    """
    playlist_length = DEFAULT_PLAYLIST_LENGTH
    try:
        if not body.emotion or not body.emotion.strip():
            raise ValidationError("emotion", "Emotion is required")
        if body.user_id:
            profile = store.get(body.user_id)
            if profile is not None:
                playlist_length = profile.playlist_length
            else:
                log_warning(
                    f"Unknown user {body.user_id!r}; using default length {playlist_length}."
                )
        playlist = assembler.assemble(body.emotion, playlist_length, body.user_id)
    except MoodlistsError as e:
        raise_http_error(e)

    return PlaylistResponse.from_playlist(playlist)

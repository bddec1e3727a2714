from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from moodlists.api.dependencies import get_preference_store
from moodlists.api.errors import raise_http_error
from moodlists.core import MoodlistsError, NotFoundError
from moodlists.data import PreferenceStore

router = APIRouter()


@router.get("/{user_id}")
def get_user(
    user_id: str,
    store: PreferenceStore = Depends(get_preference_store),
) -> dict:
    try:
        profile = store.get(user_id)
        if profile is None:
            raise NotFoundError(f"User {user_id} not found")
    except MoodlistsError as e:
        raise_http_error(e)

    return {"user": profile.model_dump()}


@router.post("")
def save_user(
    body: Dict[str, Any] = Body(...),
    store: PreferenceStore = Depends(get_preference_store),
) -> dict:
    """
    Create a profile, or merge the given fields onto an existing one.

    Example body: {"id": "alice", "playlist_length": 30}
    """
    try:
        profile = store.save(body)
    except MoodlistsError as e:
        raise_http_error(e)
    return {"user": profile.model_dump()}


@router.put("/{user_id}/preferences")
def update_preferences(
    user_id: str,
    body: Dict[str, Any] = Body(...),
    store: PreferenceStore = Depends(get_preference_store),
) -> dict:
    """
    Merge a partial preferences object onto an existing profile (404 if unknown).
    """
    try:
        profile = store.update_preferences(user_id, body)
    except MoodlistsError as e:
        raise_http_error(e)
    return {"user": profile.model_dump()}

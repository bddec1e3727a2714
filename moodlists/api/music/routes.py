from fastapi import APIRouter, Depends, Query

from moodlists.api.dependencies import get_broker, get_catalog
from moodlists.api.errors import raise_http_error
from moodlists.config import DEFAULT_SEARCH_LIMIT
from moodlists.core import MoodlistsError, ValidationError, log_step
from moodlists.spotify import CredentialBroker, SpotifyCatalog

router = APIRouter()


def _search(
    item_type: str,
    q: str | None,
    limit: int,
    broker: CredentialBroker,
    catalog: SpotifyCatalog,
) -> list:
    try:
        if not q:
            raise ValidationError("q", 'Query parameter "q" is required')
        log_step(f"Searching Spotify {item_type}s for {q!r} (limit {limit})...")
        credential = broker.get_valid_credential()
        return catalog.search(item_type, q, credential, limit=limit)
    except MoodlistsError as e:
        raise_http_error(e)


@router.get("/search/tracks")
def search_tracks(
    q: str | None = Query(default=None),
    limit: int = Query(default=DEFAULT_SEARCH_LIMIT, ge=1, le=50),
    broker: CredentialBroker = Depends(get_broker),
    catalog: SpotifyCatalog = Depends(get_catalog),
) -> dict:
    """Raw Spotify track search results, in provider order."""
    return {"tracks": _search("track", q, limit, broker, catalog)}


@router.get("/search/artists")
def search_artists(
    q: str | None = Query(default=None),
    limit: int = Query(default=DEFAULT_SEARCH_LIMIT, ge=1, le=50),
    broker: CredentialBroker = Depends(get_broker),
    catalog: SpotifyCatalog = Depends(get_catalog),
) -> dict:
    """Raw Spotify artist search results, in provider order."""
    return {"artists": _search("artist", q, limit, broker, catalog)}

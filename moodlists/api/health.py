from fastapi import APIRouter, Depends

from moodlists.api.dependencies import get_broker
from moodlists.api.errors import raise_http_error
from moodlists.core import AuthenticationError
from moodlists.spotify import CredentialBroker

router = APIRouter()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/api/test")
def spotify_connection_test(
    broker: CredentialBroker = Depends(get_broker),
) -> dict:
    """
    Check that a Spotify access token can be obtained with the configured
    client credentials.
    """
    try:
        credential = broker.get_valid_credential()
    except AuthenticationError as e:
        raise_http_error(e)
    return {
        "success": True,
        "message": "Spotify API connection successful",
        "token_received": bool(credential.token),
    }

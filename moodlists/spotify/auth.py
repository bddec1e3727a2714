"""Client-credentials authentication against the Spotify accounts service.

issue_token() performs the raw machine-to-machine exchange. CredentialBroker
owns the single shared access token of the process: it hands out the cached
credential while it is valid and refreshes it lazily once it has expired.

Refresh protocol:
  - readers of a valid credential never take the lock
  - a caller that sees no credential (or an expired one) takes the refresh
    lock, re-checks, and only then calls the issuer
  - callers queued behind that lock find the fresh credential on re-check and
    return it without issuing again, so K concurrent callers cost one call
  - the lock is released by the `with` block even when issuance raises, and
    issuance itself is bounded by SPOTIFY_REQUEST_TIMEOUT
"""

import threading
import time
from typing import Callable, Dict, Optional, Tuple

import requests

from moodlists.config import (
    SPOTIFY_CLIENT_ID,
    SPOTIFY_CLIENT_SECRET,
    SPOTIFY_REQUEST_TIMEOUT,
    SPOTIFY_TOKEN_URL,
)
from moodlists.core import (
    AuthenticationError,
    Credential,
    log_error,
    log_step,
    log_success,
)

CHECK_CREDENTIALS_HINT = (
    "Check SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET in your .env file."
)

TokenIssuer = Callable[[], Tuple[str, float]]


def issue_token(client_id: Optional[str], client_secret: Optional[str]) -> Tuple[str, float]:
    """
    Exchange client id/secret for an access token.

    Returns (access_token, ttl_seconds). Any failure (missing configuration,
    network error, non-2xx answer, malformed payload) raises
    AuthenticationError.
    """
    if not client_id or not client_secret:
        raise AuthenticationError(
            f"Spotify client credentials are not configured. {CHECK_CREDENTIALS_HINT}"
        )

    try:
        r = requests.post(
            SPOTIFY_TOKEN_URL,
            data={"grant_type": "client_credentials"},
            auth=(client_id, client_secret),
            timeout=SPOTIFY_REQUEST_TIMEOUT,
        )
        r.raise_for_status()
        payload = r.json()
        return payload["access_token"], float(payload.get("expires_in", 3600))
    except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
        raise AuthenticationError(
            f"Failed to authenticate with Spotify ({exc}). {CHECK_CREDENTIALS_HINT}"
        ) from exc


def spotify_headers(credential: Credential) -> Dict[str, str]:
    return {"Authorization": f"Bearer {credential.token}"}


class CredentialBroker:
    """Single owner of the process-wide Spotify access credential."""

    def __init__(
        self,
        issuer: Optional[TokenIssuer] = None,
        *,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        clock: Callable[[], float] = time.time,
    ):
        if issuer is None:
            cid = client_id if client_id is not None else SPOTIFY_CLIENT_ID
            secret = client_secret if client_secret is not None else SPOTIFY_CLIENT_SECRET

            def issuer() -> Tuple[str, float]:
                return issue_token(cid, secret)

        self._issuer = issuer
        self._clock = clock
        self._credential: Optional[Credential] = None
        self._refresh_lock = threading.Lock()

    def get_valid_credential(self) -> Credential:
        credential = self._credential
        if credential is not None and credential.is_valid(self._clock()):
            return credential

        with self._refresh_lock:
            # Another caller may have refreshed while we waited for the lock.
            credential = self._credential
            if credential is not None and credential.is_valid(self._clock()):
                return credential
            return self._refresh()

    def invalidate(self) -> None:
        """Drop the cached credential; the next call issues a new one."""
        with self._refresh_lock:
            self._credential = None

    def _refresh(self) -> Credential:
        log_step("Requesting Spotify access token (client credentials)...")
        issued_at = self._clock()
        try:
            token, ttl = self._issuer()
        except AuthenticationError as exc:
            log_error(str(exc))
            raise
        except Exception as exc:  # noqa: BLE001
            log_error(f"Token issuer failed: {exc}")
            raise AuthenticationError(
                f"Failed to authenticate with Spotify ({exc}). {CHECK_CREDENTIALS_HINT}"
            ) from exc

        credential = Credential(token=token, expires_at=issued_at + ttl)
        self._credential = credential
        log_success(f"Spotify access token obtained (valid for {ttl:.0f}s).")
        return credential

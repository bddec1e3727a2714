"""Public façade for the moodlists.spotify package.

This module exposes the Spotify Web API integration: client-credentials
authentication, the shared credential broker, catalog reads and the artist
id cache. Callers should import these symbols from this façade instead of
the internal auth, catalog or artists modules.
"""

from .artists import ResolutionCache
from .auth import CredentialBroker, issue_token, spotify_headers
from .catalog import SEARCH_TYPES, SpotifyCatalog

__all__ = [
    "CredentialBroker",
    "issue_token",
    "spotify_headers",
    "SpotifyCatalog",
    "SEARCH_TYPES",
    "ResolutionCache",
]

import threading
from typing import Dict, Optional

from moodlists.core import Credential, NotFoundError, UpstreamError, log_info, log_step

from .catalog import SpotifyCatalog


class ResolutionCache:
    """
    Artist display name -> Spotify artist id, for the process lifetime.

    Artist ids are permanent, so entries never expire and are never
    overwritten. Misses run one top-1 artist search; a search with no match
    is not cached, so a later call searches again.
    """

    def __init__(self, catalog: SpotifyCatalog):
        self._catalog = catalog
        self._ids: Dict[str, str] = {}
        self._write_lock = threading.Lock()

    def resolve(self, display_name: str, credential: Credential) -> str:
        artist_id = self._ids.get(display_name)
        if artist_id is not None:
            return artist_id

        log_step(f"Resolving Spotify artist id for {display_name!r}...")
        items = self._catalog.search("artist", display_name, credential, limit=1)
        if not items:
            raise NotFoundError(f'Artist "{display_name}" not found')

        found = items[0].get("id") if isinstance(items[0], dict) else None
        if not isinstance(found, str) or not found:
            raise UpstreamError("Malformed artist search payload")

        with self._write_lock:
            # Set-once: a concurrent resolver may have stored it first.
            artist_id = self._ids.setdefault(display_name, found)
        log_info(f"Found artist id for {display_name}: {artist_id}")
        return artist_id

    def peek(self, display_name: str) -> Optional[str]:
        return self._ids.get(display_name)

    def __len__(self) -> int:
        return len(self._ids)

"""Shared service instances, injected into routes with Depends().

One CredentialBroker and one ResolutionCache live for the whole process so
every route shares the same token and artist ids. The preference store is
created lazily so importing the app does not touch the data directory.
"""

import threading
from typing import Optional

from moodlists.config import USERS_FILE
from moodlists.data import PreferenceStore
from moodlists.pipeline import PlaylistAssembler
from moodlists.spotify import CredentialBroker, ResolutionCache, SpotifyCatalog


class AppState:
    def __init__(self) -> None:
        self.catalog = SpotifyCatalog()
        self.broker = CredentialBroker()
        self.resolver = ResolutionCache(self.catalog)
        self.assembler = PlaylistAssembler(self.broker, self.resolver, self.catalog)
        self._preference_store: Optional[PreferenceStore] = None
        self._store_lock = threading.Lock()

    @property
    def preference_store(self) -> PreferenceStore:
        with self._store_lock:
            if self._preference_store is None:
                self._preference_store = PreferenceStore(USERS_FILE)
            return self._preference_store


_state = AppState()


def get_state() -> AppState:
    return _state


def get_broker() -> CredentialBroker:
    return _state.broker


def get_catalog() -> SpotifyCatalog:
    return _state.catalog


def get_assembler() -> PlaylistAssembler:
    return _state.assembler


def get_preference_store() -> PreferenceStore:
    return _state.preference_store

"""JSON-backed user preference store.

On-disk layout (USERS_FILE) is a single JSON list, one object per profile:
  [
    {"id": "alice", "playlist_length": 30, "favorite_genre": "rock"},
    ...
  ]

The whole document is the unit of read and write. Each mutation reads the
list, merges, validates and writes the list back under the store lock, so two
overlapping saves (even for different ids) can never work from the same stale
snapshot.
"""

from pathlib import Path
import threading
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from moodlists.config import DEFAULT_PLAYLIST_LENGTH, USERS_FILE
from moodlists.core import (
    NotFoundError,
    StorageError,
    UserProfile,
    ValidationError,
    log_error,
    log_info,
    log_step,
    read_json_document,
    write_json_document,
)


def _to_profile(record: Mapping[str, Any]) -> UserProfile:
    try:
        return UserProfile.model_validate(dict(record))
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "profile"
        raise ValidationError(
            field, f"Invalid value for '{field}': {first.get('msg', 'invalid')}"
        ) from exc


def _stored_profile(record: Mapping[str, Any]) -> UserProfile:
    try:
        return _to_profile(record)
    except ValidationError as exc:
        raise StorageError(f"Stored profile {record.get('id')!r} is invalid: {exc}") from exc


def _index_of(records: List[Dict[str, Any]], user_id: str) -> Optional[int]:
    for i, record in enumerate(records):
        if record["id"] == user_id:
            return i
    return None


class PreferenceStore:
    def __init__(self, path: str | Path = USERS_FILE):
        self.path = Path(path)
        self._lock = threading.Lock()
        self.initialize()

    def initialize(self) -> None:
        """Create an empty document if none exists yet. Idempotent."""
        with self._lock:
            if not self.path.exists():
                write_json_document(self.path, [])
                log_info(f"Created empty user store at {self.path}")

    def _load(self) -> List[Dict[str, Any]]:
        data = read_json_document(self.path)
        if data is None:
            return []
        if not isinstance(data, list):
            raise StorageError(f"User store {self.path} does not hold a list of profiles")

        # Every record is written back on the next commit, so one we cannot
        # key must stop the store instead of being dropped from the file.
        for position, item in enumerate(data):
            if not isinstance(item, dict) or not isinstance(item.get("id"), str) or not item["id"]:
                log_error(f"Malformed user record #{position} in {self.path}: {item!r}")
                raise StorageError(
                    f"User store {self.path} holds a malformed record at position {position}"
                )
        return data

    def _commit(
        self,
        records: List[Dict[str, Any]],
        index: Optional[int],
        merged: Dict[str, Any],
    ) -> UserProfile:
        profile = _to_profile(merged)
        record = profile.model_dump()
        if index is None:
            records.append(record)
        else:
            records[index] = record
        write_json_document(self.path, records)
        return profile

    def get(self, user_id: str) -> Optional[UserProfile]:
        records = self._load()
        index = _index_of(records, user_id)
        if index is None:
            return None
        return _stored_profile(records[index])

    def save(self, data: Mapping[str, Any]) -> UserProfile:
        """
        Create or shallow-merge a profile.

        Unknown ids are created with playlist_length=DEFAULT_PLAYLIST_LENGTH
        unless the input provides one; known ids keep every field the input
        does not mention. A stored record that no longer validates raises
        StorageError; only the caller's own fields can raise ValidationError.
        """
        user_id = data.get("id")
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("id", "User id is required")

        with self._lock:
            records = self._load()
            index = _index_of(records, user_id)
            if index is None:
                log_step(f"Creating user profile {user_id!r}...")
                merged = {"id": user_id, "playlist_length": DEFAULT_PLAYLIST_LENGTH, **data}
            else:
                log_step(f"Updating user profile {user_id!r}...")
                stored = _stored_profile(records[index]).model_dump()
                merged = {**stored, **data}
            return self._commit(records, index, merged)

    def update_preferences(
        self,
        user_id: str,
        preferences: Mapping[str, Any],
    ) -> UserProfile:
        """
        Merge preferences onto an existing profile.

        Raises NotFoundError (and writes nothing) when the id is unknown. An
        `id` key inside preferences is ignored.
        """
        with self._lock:
            records = self._load()
            index = _index_of(records, user_id)
            if index is None:
                raise NotFoundError(f"User {user_id} not found")

            stored = _stored_profile(records[index]).model_dump()
            changes = {k: v for k, v in preferences.items() if k != "id"}
            log_step(f"Updating preferences for {user_id!r}: {sorted(changes)}")
            merged = {**stored, **changes, "id": user_id}
            return self._commit(records, index, merged)

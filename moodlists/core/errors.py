"""Error taxonomy shared by the catalog, pipeline, data and API layers.

Every failure the core can surface is one of these classes, so the HTTP
boundary can tell a caller mistake from a missing resource or a broken
upstream without inspecting messages.
"""

from typing import Iterable, List, Optional


class MoodlistsError(Exception):
    """Base class for all moodlists errors."""


class AuthenticationError(MoodlistsError):
    """Client-credentials issuance failed (bad id/secret, network, non-2xx)."""


class UnknownEmotionError(MoodlistsError):
    def __init__(self, emotion: str, available: Iterable[str]):
        self.emotion = emotion
        self.available: List[str] = list(available)
        super().__init__(
            f"Unknown emotion: {emotion}. "
            f"Available emotions: {', '.join(self.available)}"
        )


class NotFoundError(MoodlistsError):
    """An artist could not be resolved or a profile id is unknown."""


class UpstreamError(MoodlistsError):
    """The catalog answered with a non-2xx status or a malformed payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ValidationError(MoodlistsError):
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class StorageError(MoodlistsError):
    """The persisted profile document cannot be read back."""

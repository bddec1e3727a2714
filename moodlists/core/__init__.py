"""Public façade for the moodlists.core package.

This module exposes logging helpers, filesystem utilities, the error
taxonomy, the emotion table and the base models that every other package
relies on. Callers should import these cross-cutting concerns from this
façade instead of the internal submodules.
"""

from .emotions import EMOTION_ARTISTS, Emotion, available_emotions
from .errors import (
    AuthenticationError,
    MoodlistsError,
    NotFoundError,
    StorageError,
    UnknownEmotionError,
    UpstreamError,
    ValidationError,
)
from .fs_utils import ensure_parent_dir, read_json_document, write_json_document
from .logging_config import configure_logging
from .logging_utils import (
    log_error,
    log_info,
    log_step,
    log_success,
    log_warning,
)
from .models import Credential, Playlist, Track, UserProfile

__all__ = [
    "configure_logging",
    "log_info",
    "log_step",
    "log_success",
    "log_warning",
    "log_error",
    "ensure_parent_dir",
    "write_json_document",
    "read_json_document",
    "MoodlistsError",
    "AuthenticationError",
    "UnknownEmotionError",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
    "StorageError",
    "Emotion",
    "EMOTION_ARTISTS",
    "available_emotions",
    "Credential",
    "Track",
    "Playlist",
    "UserProfile",
]

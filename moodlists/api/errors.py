from typing import Any, Dict, NoReturn

from fastapi import HTTPException

from moodlists.core import (
    AuthenticationError,
    MoodlistsError,
    NotFoundError,
    StorageError,
    UnknownEmotionError,
    UpstreamError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (UnknownEmotionError, 400),
    (ValidationError, 400),
    (NotFoundError, 404),
    (AuthenticationError, 503),
    (UpstreamError, 502),
    (StorageError, 500),
)


def raise_http_error(exc: MoodlistsError) -> NoReturn:
    """
    Translate a core error into an HTTPException.

    detail = {"error": <class name>, "message": str(exc), ...extra context}
    """
    status_code = next(
        (code for cls, code in _STATUS_BY_ERROR if isinstance(exc, cls)), 500
    )
    detail: Dict[str, Any] = {"error": type(exc).__name__, "message": str(exc)}
    if isinstance(exc, UnknownEmotionError):
        detail["available_emotions"] = exc.available
    elif isinstance(exc, ValidationError):
        detail["field"] = exc.field
    elif isinstance(exc, UpstreamError) and exc.status_code is not None:
        detail["upstream_status"] = exc.status_code
    raise HTTPException(status_code=status_code, detail=detail) from exc

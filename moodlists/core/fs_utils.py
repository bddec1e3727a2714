import json
import os
from pathlib import Path
import tempfile
from typing import Any, Optional

from .errors import StorageError


def ensure_parent_dir(path: Path | str) -> Path:
    """
    Make sure the directory holding `path` exists and return `path` as a Path.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    return target


def write_json_document(path: str | Path, data: Any) -> None:
    """
    Replace the JSON document at `path` as a whole.

    The payload is serialized before the filesystem is touched, so a value
    that cannot be encoded leaves the current document alone. The bytes then
    go to a sibling temp file which is fsynced and renamed over the target:
    readers see the old document or the new one, never a partial write.
    Any OS-level failure is reported as StorageError.
    """
    payload = json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")
    target = ensure_parent_dir(path)

    tmp = tempfile.NamedTemporaryFile(
        dir=target.parent, prefix=f".{target.name}.", suffix=".tmp", delete=False
    )
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(payload)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_path, target)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise StorageError(f"Could not write {target}: {exc}") from exc


def read_json_document(path: str | Path) -> Optional[Any]:
    """
    Parse the JSON document at `path`.

    Returns None when the file does not exist. A file that exists but cannot
    be read, is not valid UTF-8 or is not valid JSON raises StorageError;
    callers never get a half-parsed or substituted value.
    """
    source = Path(path)
    try:
        raw = source.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise StorageError(f"Could not read {source}: {exc}") from exc

    try:
        return json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise StorageError(f"{source} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise StorageError(f"{source} is not valid JSON: {exc}") from exc

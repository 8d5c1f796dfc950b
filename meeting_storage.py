"""JSON file persistence for meeting notes."""

import json
import logging
import os
import tempfile
from datetime import date
from pathlib import Path

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class StorageError(Exception):
    """The meetings file could not be read or written."""


def load_meetings(path: str | os.PathLike) -> dict[date, list[str]]:
    """Load ``{date: [note, ...]}`` from ``path``; a missing file is empty."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise StorageError(f"{path}: not valid JSON ({exc})") from exc
    except OSError as exc:
        raise StorageError(f"{path}: {exc}") from exc

    if not isinstance(data, dict) or not isinstance(data.get("meetings"), dict):
        raise StorageError(f"{path}: expected an object with a 'meetings' object")

    meetings: dict[date, list[str]] = {}
    for key, notes in data["meetings"].items():
        try:
            day = date.fromisoformat(key)
        except ValueError:
            logger.warning("%s: skipping bad date key %r", path, key)
            continue
        if not isinstance(notes, list):
            logger.warning("%s: skipping %s, notes are not a list", path, key)
            continue
        kept = [n for n in notes if isinstance(n, str) and n.strip()]
        if kept:
            meetings[day] = kept
    return meetings


def save_meetings(path: str | os.PathLike, meetings: dict[date, list[str]]) -> None:
    """Atomically write ``meetings`` to ``path``; empty days are left out."""
    path = Path(path)
    payload = {
        "version": FORMAT_VERSION,
        "meetings": {
            d.isoformat(): list(notes)
            for d, notes in sorted(meetings.items()) if notes
        },
    }
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".meetings-", suffix=".json",
                                        dir=str(path.parent))
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as exc:
        raise StorageError(f"{path}: {exc}") from exc
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.remove(tmp_name)
    logger.debug("saved notes for %d day(s) to %s", len(payload["meetings"]), path)


def set_aside(path: str | os.PathLike) -> Path:
    """Move an unreadable meetings file to ``<name>.corrupt`` and return the new path.

    Keeps the user's notes out of reach of the next save.
    """
    path = Path(path)
    target = path.with_name(path.name + ".corrupt")
    try:
        os.replace(path, target)
    except OSError as exc:
        raise StorageError(f"{path}: could not move aside ({exc})") from exc
    logger.warning("moved unreadable meetings file to %s", target)
    return target

# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""File-backed session store: memory mirrored to a JSON file."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

import structlog

from weblet.kernel.exceptions import SessionPersistenceException, SessionStoreLoadException
from weblet.session.session import ZERO_SESSION, Session

logger = structlog.get_logger("weblet.session")


class FileSessionStore:
    """Session store that keeps every session in memory and in a JSON file.

    The file holds ``{"<id>": {"<key>": "<value>", ...}, ...}``. Each
    successful :meth:`save` or :meth:`delete` rewrites the whole file before
    returning: the mapping is written to a temporary file in the same
    directory, fsynced, then renamed over the target. A failed write raises
    :class:`SessionPersistenceException` and leaves both the file and the
    in-memory mapping as they were.

    Args:
        path: Location of the JSON file. A missing file is an empty store.

    Raises:
        SessionStoreLoadException: The file exists but cannot be read or is
            not a JSON object of string-to-string objects.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._sessions: dict[str, Session] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def save(self, session: Session) -> None:
        """Insert or replace *session* and rewrite the file."""
        if session.is_zero():
            return
        with self._lock:
            sessions = dict(self._sessions)
            sessions[session.id] = session
            self._write(sessions)
            self._sessions = sessions

    def delete(self, session_id: str) -> None:
        """Remove *session_id*; an unknown id neither fails nor writes."""
        with self._lock:
            if session_id not in self._sessions:
                return
            sessions = dict(self._sessions)
            del sessions[session_id]
            self._write(sessions)
            self._sessions = sessions

    def find(self, session_id: str) -> Session:
        with self._lock:
            return self._sessions.get(session_id, ZERO_SESSION)

    def find_all(self) -> list[Session]:
        with self._lock:
            return sorted(self._sessions.values(), key=lambda s: s.id)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> dict[str, Session]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("session_file_missing", path=str(self._path))
            return {}
        except OSError as exc:
            raise SessionStoreLoadException(
                f"cannot read session file {self._path}: {exc}",
                code="SESSION_LOAD",
                context={"path": str(self._path)},
            ) from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SessionStoreLoadException(
                f"malformed session file {self._path}: {exc}",
                code="SESSION_LOAD",
                context={"path": str(self._path)},
            ) from exc

        sessions = {sid: Session(sid, values) for sid, values in _validate(data, self._path).items()}
        logger.debug("session_file_loaded", path=str(self._path), sessions=len(sessions))
        return sessions

    def _write(self, sessions: dict[str, Session]) -> None:
        payload = {sid: dict(s.values) for sid, s in sessions.items()}
        directory = self._path.parent
        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(payload, tmp, sort_keys=True)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as exc:
            logger.error("session_file_write_failed", path=str(self._path), error=str(exc))
            raise SessionPersistenceException(
                f"cannot write session file {self._path}: {exc}",
                code="SESSION_WRITE",
                context={"path": str(self._path)},
            ) from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)


def _validate(data: Any, path: Path) -> dict[str, dict[str, str]]:
    """Check that *data* is ``{str: {str: str}}``."""
    if not isinstance(data, dict):
        raise SessionStoreLoadException(
            f"malformed session file {path}: expected a JSON object",
            code="SESSION_LOAD",
            context={"path": str(path)},
        )
    for sid, values in data.items():
        if not isinstance(values, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in values.items()
        ):
            raise SessionStoreLoadException(
                f"malformed session file {path}: session {sid!r} is not an object of strings",
                code="SESSION_LOAD",
                context={"path": str(path), "session_id": sid},
            )
    return data

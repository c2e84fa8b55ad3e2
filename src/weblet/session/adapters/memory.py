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
"""In-memory session store."""

from __future__ import annotations

import threading

from weblet.session.session import ZERO_SESSION, Session


class InMemorySessionStore:
    """In-memory session store guarded by a single ``threading.Lock``.

    Suitable for development, testing, and single-process applications.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def save(self, session: Session) -> None:
        """Insert or replace *session*. Saving the zero session does nothing."""
        if session.is_zero():
            return
        with self._lock:
            self._sessions[session.id] = session

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def find(self, session_id: str) -> Session:
        """Return the stored session, or the zero session if absent."""
        with self._lock:
            return self._sessions.get(session_id, ZERO_SESSION)

    def find_all(self) -> list[Session]:
        """Return every stored session, sorted by id."""
        with self._lock:
            return sorted(self._sessions.values(), key=lambda s: s.id)

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
"""Session store protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from weblet.session.session import Session


@runtime_checkable
class SessionStore(Protocol):
    """Thread-safe session persistence interface.

    All session backends (in-memory, file, sharded) implement this protocol.
    ``find`` returns the zero session on a miss, ``find_all`` returns sessions
    sorted by id, and saving the zero session is a no-op.
    """

    def save(self, session: Session) -> None: ...

    def delete(self, session_id: str) -> None: ...

    def find(self, session_id: str) -> Session: ...

    def find_all(self) -> list[Session]: ...

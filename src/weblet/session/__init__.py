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
"""Weblet Session: server-side sessions with pluggable stores.

Import concrete store types from the adapter package::

    from weblet.session.adapters.memory import InMemorySessionStore
    from weblet.session.adapters.file import FileSessionStore
    from weblet.session.adapters.sharded import ShardedSessionStore
"""

from weblet.session.factory import create_session_store, session_id_factory
from weblet.session.ports.outbound import SessionStore
from weblet.session.session import ZERO_SESSION, Session, new_session_id, secure_session_id

__all__ = [
    "ZERO_SESSION",
    "Session",
    "SessionStore",
    "create_session_store",
    "new_session_id",
    "secure_session_id",
    "session_id_factory",
]

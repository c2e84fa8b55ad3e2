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
"""Builds the configured session store from ``weblet.session.*``."""

from __future__ import annotations

from collections.abc import Callable

import structlog

from weblet.config.properties.session import SessionProperties
from weblet.core.config import Config
from weblet.session.ports.outbound import SessionStore
from weblet.session.session import new_session_id, secure_session_id

logger = structlog.get_logger("weblet.session")


def create_session_store(config: Config) -> SessionStore:
    """Return the store selected by ``weblet.session.store``.

    ``memory`` (default), ``file`` (uses ``weblet.session.file``) or
    ``sharded`` (``weblet.session.shards`` in-memory shards).
    """
    props = config.bind(SessionProperties)
    store_type = props.store.lower()

    if store_type == "file":
        from weblet.session.adapters.file import FileSessionStore

        logger.info("session_store_created", store="file", path=props.file)
        return FileSessionStore(props.file)

    if store_type == "sharded":
        from weblet.session.adapters.memory import InMemorySessionStore
        from weblet.session.adapters.sharded import ShardedSessionStore

        logger.info("session_store_created", store="sharded", shards=props.shards)
        return ShardedSessionStore([InMemorySessionStore() for _ in range(props.shards)])

    if store_type != "memory":
        raise ValueError(f"Unknown session store type '{props.store}' (expected memory, file or sharded)")

    from weblet.session.adapters.memory import InMemorySessionStore

    logger.info("session_store_created", store="memory")
    return InMemorySessionStore()


def session_id_factory(config: Config) -> Callable[[], str]:
    """Return the id generator selected by ``weblet.session.secure_ids``."""
    props = config.bind(SessionProperties)
    return secure_session_id if props.secure_ids else new_session_id

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
"""Sharded session store: partitions ids across independently locked stores."""

from __future__ import annotations

import zlib
from collections.abc import Sequence

from weblet.session.ports.outbound import SessionStore
from weblet.session.session import Session


class ShardedSessionStore:
    """Routes each session id to one of several child stores by CRC32 hash.

    Each child keeps its own lock, so operations on ids in different shards
    do not contend. Operations are linearizable per shard only;
    :meth:`find_all` is a merge of per-shard snapshots.
    """

    def __init__(self, shards: Sequence[SessionStore]) -> None:
        if not shards:
            raise ValueError("ShardedSessionStore needs at least one shard")
        self._shards = list(shards)

    @property
    def shards(self) -> list[SessionStore]:
        return list(self._shards)

    def shard_for(self, session_id: str) -> SessionStore:
        index = zlib.crc32(session_id.encode("utf-8")) % len(self._shards)
        return self._shards[index]

    def save(self, session: Session) -> None:
        if session.is_zero():
            return
        self.shard_for(session.id).save(session)

    def delete(self, session_id: str) -> None:
        self.shard_for(session_id).delete(session_id)

    def find(self, session_id: str) -> Session:
        return self.shard_for(session_id).find(session_id)

    def find_all(self) -> list[Session]:
        sessions: list[Session] = []
        for shard in self._shards:
            sessions.extend(shard.find_all())
        return sorted(sessions, key=lambda s: s.id)

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
"""Session: immutable server-side key/value record."""

from __future__ import annotations

import random
import secrets
from collections.abc import Callable, Mapping
from types import MappingProxyType

_HEX_CHARS = "0123456789abcdef"
_ID_LENGTH = 32


def new_session_id() -> str:
    """Return 32 lowercase hex characters from the non-cryptographic ``random`` source.

    Not suitable where the id must be unpredictable; see :func:`secure_session_id`.
    """
    return "".join(random.choices(_HEX_CHARS, k=_ID_LENGTH))


def secure_session_id() -> str:
    """Return 32 lowercase hex characters from ``secrets``."""
    return secrets.token_hex(_ID_LENGTH // 2)


class Session:
    """A session identified by an opaque id, holding string values.

    Sessions are values: :meth:`with_value` and :meth:`without_value` return a
    new Session backed by a fresh dict and never touch the receiver. The
    session with an empty id is the *zero session*, meaning "no session".

    Attributes:
        id: The session identifier, ``""`` for the zero session.
        values: Read-only view of the stored values.
    """

    __slots__ = ("_id", "_values")

    def __init__(self, session_id: str = "", values: Mapping[str, str] | None = None) -> None:
        self._id = session_id
        self._values: dict[str, str] = dict(values) if values else {}

    @classmethod
    def new(cls, id_factory: Callable[[], str] = new_session_id) -> Session:
        """Create an empty session with a freshly generated id."""
        return cls(id_factory())

    @classmethod
    def zero(cls) -> Session:
        return cls()

    @property
    def id(self) -> str:
        return self._id

    @property
    def values(self) -> Mapping[str, str]:
        return MappingProxyType(self._values)

    def is_zero(self) -> bool:
        """Return ``True`` if this session has an empty id."""
        return self._id == ""

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def keys(self) -> list[str]:
        """Return the value keys in lexicographic order."""
        return sorted(self._values)

    def with_value(self, key: str, value: str) -> Session:
        """Return a copy of this session with *key* set to *value*."""
        values = dict(self._values)
        values[key] = value
        return Session(self._id, values)

    def without_value(self, key: str) -> Session:
        """Return a copy of this session without *key*."""
        values = dict(self._values)
        values.pop(key, None)
        return Session(self._id, values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Session):
            return NotImplemented
        return self._id == other._id and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._id, frozenset(self._values.items())))

    def __repr__(self) -> str:
        return f"Session(id={self._id!r}, values={self._values!r})"


ZERO_SESSION = Session()

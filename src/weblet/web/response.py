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
"""Response values returned by handlers.

A handler never writes to the transport. It returns one of six response
variants, optionally decorated with cookies and headers, and the
:class:`~weblet.web.renderer.ResponseRenderer` performs the I/O:

- :class:`TemplateResponse` -> render a named template with data
- :class:`JsonResponse` -> serialize a value as JSON
- :class:`FileResponse` -> stream a file from disk
- :class:`ContentResponse` -> write raw bytes
- :class:`RedirectResponse` -> 303 See Other
- :class:`StatusResponse` -> a status code with a plain text body

Every value is frozen; ``with_*`` decorators return a new value. Values
compare by field but are unhashable, since headers and template data are
read-only mappings.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from types import MappingProxyType
from typing import Any, TypeVar

R = TypeVar("R", bound="Response")


@dataclass(frozen=True)
class Cookie:
    """A cookie to set on the response.

    ``max_age`` is ``None`` for no Max-Age attribute, ``0`` to delete the
    cookie immediately, or a positive number of seconds.
    """

    name: str
    value: str
    max_age: int | None = None


def _max_age_seconds(max_age: timedelta | float) -> int | None:
    seconds = max_age.total_seconds() if isinstance(max_age, timedelta) else max_age
    if seconds < 0:
        return 0
    return int(seconds) or None


@dataclass(frozen=True)
class Response:
    """Base of all response variants; carries cookies and headers.

    A bare ``Response()`` has no variant and renders as 404 Not Found.
    """

    cookies: tuple[Cookie, ...] = field(default=(), kw_only=True)
    headers: Mapping[str, str] = field(default_factory=dict, kw_only=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cookies", tuple(self.cookies))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def with_cookie(self: R, name: str, value: str, max_age: timedelta | float = 0) -> R:
        """Return a copy with a cookie appended.

        - ``max_age == 0`` means no Max-Age attribute.
        - ``max_age < 0`` means delete the cookie now (``Max-Age=0``).
        - ``max_age > 0`` sets Max-Age in whole seconds.
        """
        cookie = Cookie(name=name, value=value, max_age=_max_age_seconds(max_age))
        return dataclasses.replace(self, cookies=(*self.cookies, cookie))

    def with_delete_cookie(self: R, name: str) -> R:
        """Same as ``with_cookie(name, "", -1)``."""
        return self.with_cookie(name, "", -1)

    def with_header(self: R, key: str, value: str) -> R:
        """Return a copy with header *key* set to *value*."""
        headers = dict(self.headers)
        headers[key] = value
        return dataclasses.replace(self, headers=headers)


@dataclass(frozen=True)
class TemplateResponse(Response):
    """Render template *name* with *data* bound into it."""

    name: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "data", MappingProxyType(dict(self.data)))


@dataclass(frozen=True)
class JsonResponse(Response):
    """Serialize *data* as JSON."""

    data: Any = None


@dataclass(frozen=True)
class FileResponse(Response):
    """Stream the file at *path*, optionally overriding type and disposition."""

    path: str
    content_type: str | None = None
    disposition: str | None = None


@dataclass(frozen=True)
class ContentResponse(Response):
    """Write *data* verbatim, optionally with type and disposition."""

    data: bytes
    content_type: str | None = None
    disposition: str | None = None


@dataclass(frozen=True)
class RedirectResponse(Response):
    """Redirect to *location* with 303 See Other."""

    location: str


@dataclass(frozen=True)
class StatusResponse(Response):
    """Reply with *status_code* and *text* as the body."""

    status_code: int
    text: str = ""


def not_found_response(fmt: str, *args: Any) -> StatusResponse:
    """A 404 status response with a printf-style message."""
    return StatusResponse(404, fmt % args if args else fmt)


def internal_server_error_response(fmt: str, *args: Any) -> StatusResponse:
    """A 500 status response with a printf-style message."""
    return StatusResponse(500, fmt % args if args else fmt)

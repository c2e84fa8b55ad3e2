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
"""Request accessors handed to handlers."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from starlette.datastructures import FormData, UploadFile
from starlette.requests import Request

from weblet.kernel.exceptions import ResourceNotFoundException


class FormFile:
    """An uploaded file part. The filename is set by the client; do not trust it."""

    def __init__(self, upload: UploadFile) -> None:
        self._upload = upload

    @property
    def filename(self) -> str:
        return self._upload.filename or ""

    @property
    def size(self) -> int:
        return self._upload.size or 0

    @property
    def content_type(self) -> str | None:
        return self._upload.content_type

    def read(self, size: int = -1) -> bytes:
        return self._upload.file.read(size)

    def close(self) -> None:
        """Release the spooled upload. Call it whether or not you read."""
        self._upload.file.close()


@runtime_checkable
class WebRequest(Protocol):
    """What a handler may ask of the incoming request.

    Accessors return an empty string (or the given default) when a value is
    absent; only :meth:`form_file` raises.
    """

    def is_post(self) -> bool: ...

    def query(self, name: str) -> str: ...

    def post_form(self, name: str) -> str: ...

    def form_file(self, name: str) -> FormFile: ...

    def cookie_value(self, name: str, default: str = "") -> str: ...


class StarletteWebRequest:
    """:class:`WebRequest` over a Starlette ``Request``.

    Build it with :meth:`from_starlette`, which reads the form body of POST
    requests up front so the accessors can stay synchronous.
    """

    def __init__(self, request: Request, form: FormData | None = None) -> None:
        self._request = request
        self._form = form if form is not None else FormData()

    @classmethod
    async def from_starlette(cls, request: Request) -> StarletteWebRequest:
        form = await request.form() if request.method == "POST" else None
        return cls(request, form)

    @property
    def method(self) -> str:
        return self._request.method

    @property
    def path(self) -> str:
        return self._request.url.path

    def is_post(self) -> bool:
        return self._request.method == "POST"

    def query(self, name: str) -> str:
        """First query parameter named *name*, or ``""``."""
        return self._request.query_params.get(name, "")

    def post_form(self, name: str) -> str:
        """First form field named *name* from the POST body, or ``""``."""
        value = self._form.get(name)
        return value if isinstance(value, str) else ""

    def form_file(self, name: str) -> FormFile:
        """The first uploaded file for *name*.

        Raises:
            ResourceNotFoundException: No file part named *name* was sent.
        """
        value = self._form.get(name)
        if not isinstance(value, UploadFile):
            raise ResourceNotFoundException(f"no such file: {name}", code="FORM_FILE", context={"field": name})
        return FormFile(value)

    def cookie_value(self, name: str, default: str = "") -> str:
        return self._request.cookies.get(name, default)

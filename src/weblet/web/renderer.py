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
"""ResponseRenderer: turns response values into Starlette responses."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator, Mapping
from typing import Any

import structlog
from jinja2 import Environment
from pydantic import BaseModel
from starlette.requests import Request
from starlette.responses import FileResponse as StarletteFileResponse
from starlette.responses import PlainTextResponse, StreamingResponse
from starlette.responses import RedirectResponse as StarletteRedirectResponse
from starlette.responses import Response as StarletteResponse

from weblet.kernel.exceptions import SerializationException
from weblet.web.response import (
    ContentResponse,
    FileResponse,
    JsonResponse,
    RedirectResponse,
    Response,
    StatusResponse,
    TemplateResponse,
)
from weblet.web.templates import TemplateLoader

logger = structlog.get_logger("weblet.web")

NOT_FOUND_TEXT = "404 page not found"


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _serialize_json(data: Any) -> bytes:
    """Compact JSON encoding; Pydantic models are dumped in JSON mode."""
    try:
        return json.dumps(
            data,
            default=_json_default,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationException(f"cannot marshal json: {exc}", code="JSON_SERIALIZE") from exc


class ResponseRenderer:
    """Renders a :class:`~weblet.web.response.Response` in one pass.

    The returned Starlette response is the transport sink: nothing reaches
    the client until the ASGI server sends it, and the status line, cookies
    and headers all go out before the first body chunk. Every outgoing
    response carries the cookies (in order) and the headers of *response*,
    then the variant decides status and body.

    Cookies and headers are kept even when the variant fails and the body turns
    into a 500 diagnostic. A template that fails part-way through rendering
    has already committed status 200, so the diagnostic is appended to the
    partial body instead.

    Args:
        template_loader: Shared, read-only source of compiled templates.
    """

    def __init__(self, template_loader: TemplateLoader) -> None:
        if template_loader is None:
            raise ValueError("ResponseRenderer requires a template loader")
        self._template_loader = template_loader

    def render(self, request: Request | None, response: Response | None) -> StarletteResponse:
        """Render *response*; ``None`` or a bare ``Response()`` is a 404."""
        if response is None:
            response = Response()
        out = self._content(response)
        self._apply_cookies(out, response)
        if request is not None:
            logger.debug(
                "response_rendered",
                path=request.url.path,
                kind=type(response).__name__,
                status_code=out.status_code,
            )
        return out

    # ------------------------------------------------------------------
    # Cookies and headers
    # ------------------------------------------------------------------

    @staticmethod
    def _apply_cookies(out: StarletteResponse, response: Response) -> None:
        # name, value and Max-Age only; Path/SameSite are left unset.
        for cookie in response.cookies:
            out.set_cookie(
                cookie.name,
                cookie.value,
                max_age=cookie.max_age,
                path=None,
                samesite=None,
            )

    @staticmethod
    def _headers(response: Response) -> Mapping[str, str]:
        return dict(response.headers)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def _content(self, response: Response) -> StarletteResponse:
        if isinstance(response, TemplateResponse):
            return self._render_template(response)
        if isinstance(response, JsonResponse):
            return self._render_json(response)
        if isinstance(response, FileResponse):
            return self._render_file(response)
        if isinstance(response, ContentResponse):
            out = StarletteResponse(response.data, status_code=200, headers=self._headers(response))
            self._override_content_headers(out, response.content_type, response.disposition)
            return out
        if isinstance(response, RedirectResponse):
            return StarletteRedirectResponse(response.location, status_code=303, headers=self._headers(response))
        if isinstance(response, StatusResponse):
            return StarletteResponse(response.text, status_code=response.status_code, headers=self._headers(response))
        return self._error(404, NOT_FOUND_TEXT, response)

    def _render_template(self, response: TemplateResponse) -> StarletteResponse:
        try:
            env = self._template_loader.load()
        except Exception as exc:
            logger.error("template_load_failed", template=response.name, error=str(exc))
            return self._error(500, f"cannot load templates: {exc}", response)
        return StreamingResponse(
            self._stream_template(env, response.name, response.data),
            status_code=200,
            headers=self._headers(response),
            media_type="text/html",
        )

    @staticmethod
    def _stream_template(env: Environment, name: str, data: Mapping[str, Any]) -> Iterator[str]:
        try:
            yield from env.get_template(name).generate(dict(data))
        except Exception as exc:
            logger.error("template_render_failed", template=name, error=str(exc))
            yield f"cannot render {name}: {exc}"

    def _render_json(self, response: JsonResponse) -> StarletteResponse:
        try:
            body = _serialize_json(response.data)
        except SerializationException as exc:
            logger.error("json_serialization_failed", error=str(exc))
            return self._error(500, str(exc), response)
        return StarletteResponse(
            body,
            status_code=200,
            headers=self._headers(response),
            media_type="application/json",
        )

    def _render_file(self, response: FileResponse) -> StarletteResponse:
        if not os.path.isfile(response.path):
            logger.debug("file_not_found", path=response.path)
            return self._error(404, NOT_FOUND_TEXT, response)
        out = StarletteFileResponse(response.path, headers=self._headers(response))
        self._override_content_headers(out, response.content_type, response.disposition)
        return out

    @staticmethod
    def _override_content_headers(
        out: StarletteResponse,
        content_type: str | None,
        disposition: str | None,
    ) -> None:
        if content_type:
            out.headers["content-type"] = content_type
        if disposition:
            out.headers["content-disposition"] = disposition

    def _error(self, status_code: int, text: str, response: Response) -> StarletteResponse:
        out = PlainTextResponse(text, status_code=status_code, headers=self._headers(response))
        out.headers["content-type"] = "text/plain; charset=utf-8"
        out.headers["x-content-type-options"] = "nosniff"
        return out

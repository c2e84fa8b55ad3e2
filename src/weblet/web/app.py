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
"""Weblet application factory built on Starlette."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import Response as StarletteResponse
from starlette.routing import BaseRoute, Mount, Route
from starlette.staticfiles import StaticFiles

from weblet.web.renderer import ResponseRenderer
from weblet.web.request import StarletteWebRequest, WebRequest
from weblet.web.request_logger import RequestLoggingMiddleware
from weblet.web.response import Response

Handler = Callable[[WebRequest], Response | None]


@dataclass(frozen=True)
class RouteBinding:
    """Binds an exact path to a synchronous handler."""

    path: str
    handler: Handler
    methods: tuple[str, ...] = ("GET", "POST")


def _endpoint(handler: Handler, renderer: ResponseRenderer) -> Callable[[Request], Awaitable[StarletteResponse]]:
    async def endpoint(request: Request) -> StarletteResponse:
        web_request = await StarletteWebRequest.from_starlette(request)
        result = await run_in_threadpool(handler, web_request)
        return renderer.render(request, result)

    return endpoint


def create_app(
    bindings: Sequence[RouteBinding],
    renderer: ResponseRenderer,
    static_dir: str | None = None,
    static_path: str = "/static",
    debug: bool = False,
) -> Starlette:
    """Create a Starlette application from an explicit list of route bindings.

    Each handler runs in a worker thread and its result goes through
    *renderer*. Paths with no binding, and methods a binding does not
    accept, render as 404 through the same renderer. When *static_dir* is set, its files are served under
    *static_path*.
    """
    routes: list[BaseRoute] = []
    if static_dir is not None:
        routes.append(Mount(static_path, app=StaticFiles(directory=static_dir), name="static"))
    for binding in bindings:
        routes.append(Route(binding.path, _endpoint(binding.handler, renderer), methods=list(binding.methods)))

    async def not_found(request: Request, exc: Exception) -> StarletteResponse:
        return renderer.render(request, None)

    return Starlette(
        debug=debug,
        routes=routes,
        middleware=[Middleware(RequestLoggingMiddleware)],
        exception_handlers={404: not_found, 405: not_found},
    )

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
"""ASGI middleware that logs one event per HTTP exchange."""

from __future__ import annotations

import time

import structlog
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = structlog.get_logger("weblet.web")


class RequestLoggingMiddleware:
    """Logs ``http_request`` with method, path, status and duration.

    An exception escaping the app is logged as ``http_request_failed``
    instead and re-raised. Non-HTTP scopes pass through untouched.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        fields = {"method": scope["method"], "path": scope["path"]}
        status: list[int] = []

        async def capture_status(message: Message) -> None:
            if message["type"] == "http.response.start":
                status.append(message["status"])
            await send(message)

        try:
            await self.app(scope, receive, capture_status)
        except Exception as exc:
            logger.error(
                "http_request_failed",
                **fields,
                duration_ms=_elapsed_ms(started),
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise
        logger.info("http_request", **fields, status_code=status[0] if status else 500, duration_ms=_elapsed_ms(started))


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)

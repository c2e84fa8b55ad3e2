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
"""Weblet Web: response values, renderer, templates, and Starlette wiring."""

from weblet.web.app import RouteBinding, create_app
from weblet.web.renderer import ResponseRenderer
from weblet.web.request import FormFile, StarletteWebRequest, WebRequest
from weblet.web.request_logger import RequestLoggingMiddleware
from weblet.web.response import (
    ContentResponse,
    Cookie,
    FileResponse,
    JsonResponse,
    RedirectResponse,
    Response,
    StatusResponse,
    TemplateResponse,
    internal_server_error_response,
    not_found_response,
)
from weblet.web.templates import DefaultTemplateLoader, NullTemplateLoader, PageParams, TemplateLoader

__all__ = [
    "ContentResponse",
    "Cookie",
    "DefaultTemplateLoader",
    "FileResponse",
    "FormFile",
    "JsonResponse",
    "NullTemplateLoader",
    "PageParams",
    "RedirectResponse",
    "RequestLoggingMiddleware",
    "Response",
    "ResponseRenderer",
    "RouteBinding",
    "StarletteWebRequest",
    "StatusResponse",
    "TemplateLoader",
    "TemplateResponse",
    "WebRequest",
    "create_app",
    "internal_server_error_response",
    "not_found_response",
]

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
"""Sample handlers: a greeting stored in the session, an echo, and an adder."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta

import structlog

from weblet.kernel.exceptions import ResourceNotFoundException, SessionPersistenceException
from weblet.session.ports.outbound import SessionStore
from weblet.session.session import Session, new_session_id
from weblet.web.app import RouteBinding
from weblet.web.request import WebRequest
from weblet.web.response import (
    JsonResponse,
    RedirectResponse,
    Response,
    TemplateResponse,
    internal_server_error_response,
    not_found_response,
)

logger = structlog.get_logger("weblet.sample")

SESSION_COOKIE_NAME = "SAMPLE_SESSION_ID"


def _to_int(value: str) -> int:
    # parse errors count as zero
    try:
        return int(value)
    except ValueError:
        return 0


class SampleHandlers:
    """Handlers of the sample application.

    Args:
        session_store: Where the visitor's name is kept.
        id_factory: Generates ids for new sessions.
        cookie_name: Cookie carrying the session id.
        cookie_max_age: Lifetime of that cookie.
    """

    def __init__(
        self,
        session_store: SessionStore,
        id_factory: Callable[[], str] = new_session_id,
        cookie_name: str = SESSION_COOKIE_NAME,
        cookie_max_age: timedelta = timedelta(hours=24),
    ) -> None:
        self._store = session_store
        self._id_factory = id_factory
        self._cookie_name = cookie_name
        self._cookie_max_age = cookie_max_age

    def bindings(self) -> list[RouteBinding]:
        return [
            RouteBinding("/", self.index),
            RouteBinding("/say", self.say),
            RouteBinding("/add", self.add),
            RouteBinding("/upload", self.upload, methods=("POST",)),
            RouteBinding("/logout", self.logout, methods=("POST",)),
        ]

    def index(self, req: WebRequest) -> Response:
        """GET shows the stored name; POST stores it and redirects back."""
        session_id = req.cookie_value(self._cookie_name, "")
        session = self._store.find(session_id)
        if req.is_post():
            if session.is_zero():
                session = Session.new(self._id_factory)
            session = session.with_value("name", req.post_form("name"))
            try:
                self._store.save(session)
            except SessionPersistenceException as exc:
                return internal_server_error_response("cannot save session: %s", exc)
            res: Response = RedirectResponse("/")
            if session_id != session.id:
                res = res.with_cookie(self._cookie_name, session.id, self._cookie_max_age)
            return res
        return TemplateResponse("index.html", {"name": session.get("name", "")})

    def say(self, req: WebRequest) -> Response:
        return TemplateResponse("say.html", {"message": req.query("message")})

    def add(self, req: WebRequest) -> Response:
        value1 = value2 = result = 0
        if req.is_post():
            value1 = _to_int(req.post_form("value1"))
            value2 = _to_int(req.post_form("value2"))
            result = value1 + value2
        return TemplateResponse("add.html", {"value1": value1, "value2": value2, "result": result})

    def upload(self, req: WebRequest) -> Response:
        """Report the name and size of the uploaded ``file`` part."""
        try:
            form_file = req.form_file("file")
        except ResourceNotFoundException as exc:
            return not_found_response("%s", exc)
        try:
            data = form_file.read()
        finally:
            form_file.close()
        return JsonResponse({"filename": form_file.filename, "size": len(data)})

    def logout(self, req: WebRequest) -> Response:
        """Forget the session and delete its cookie."""
        session_id = req.cookie_value(self._cookie_name, "")
        try:
            self._store.delete(session_id)
        except SessionPersistenceException as exc:
            return internal_server_error_response("cannot delete session: %s", exc)
        logger.info("session_deleted")
        return RedirectResponse("/").with_delete_cookie(self._cookie_name)

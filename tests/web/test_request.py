"""Tests for the Starlette-backed WebRequest adapter."""

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from weblet.kernel.exceptions import ResourceNotFoundException
from weblet.web.request import StarletteWebRequest, WebRequest


async def inspect(request: Request) -> JSONResponse:
    req = await StarletteWebRequest.from_starlette(request)
    try:
        form_file = req.form_file("file")
        upload = {"filename": form_file.filename, "size": form_file.size, "data": form_file.read().decode()}
        form_file.close()
    except ResourceNotFoundException as exc:
        upload = {"error": str(exc)}
    return JSONResponse(
        {
            "is_web_request": isinstance(req, WebRequest),
            "is_post": req.is_post(),
            "message": req.query("message"),
            "name": req.post_form("name"),
            "sid": req.cookie_value("sid", "none"),
            "upload": upload,
        }
    )


@pytest.fixture
def client() -> TestClient:
    app = Starlette(routes=[Route("/", inspect, methods=["GET", "POST"])])
    return TestClient(app)


class TestStarletteWebRequest:
    def test_get_defaults(self, client):
        data = client.get("/").json()
        assert data["is_web_request"] is True
        assert data["is_post"] is False
        assert data["message"] == ""
        assert data["name"] == ""
        assert data["sid"] == "none"

    def test_query_returns_first_value(self, client):
        data = client.get("/?message=hello&message=again").json()
        assert data["message"] == "hello"

    def test_post_form(self, client):
        data = client.post("/", data={"name": "Alice"}).json()
        assert data["is_post"] is True
        assert data["name"] == "Alice"

    def test_form_ignored_for_get(self, client):
        data = client.get("/?name=query-only").json()
        assert data["name"] == ""

    def test_cookie_value(self):
        app = Starlette(routes=[Route("/", inspect)])
        client = TestClient(app, cookies={"sid": "abc123"})
        assert client.get("/").json()["sid"] == "abc123"

    def test_form_file(self, client):
        data = client.post("/", files={"file": ("notes.txt", b"hello", "text/plain")}).json()
        assert data["upload"] == {"filename": "notes.txt", "size": 5, "data": "hello"}

    def test_missing_form_file_raises_not_found(self, client):
        data = client.post("/", data={"name": "x"}).json()
        assert data["upload"] == {"error": "no such file: file"}

    def test_text_field_is_not_a_file(self, client):
        data = client.post("/", data={"file": "just text"}).json()
        assert "error" in data["upload"]

"""Integration tests for CORS handling and request IDs."""

import pytest
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.testclient import TestClient

from keyservice.middleware.cors import CORSHeadersMiddleware
from keyservice.middleware.request_context import RequestContextMiddleware, request_id_var

HEADERS = {"Access-Control-Allow-Origin": "https://example.test"}


def _make_app() -> FastAPI:
    """Build a minimal app with both middlewares."""
    test_app = FastAPI()
    test_app.add_middleware(RequestContextMiddleware)
    test_app.add_middleware(CORSHeadersMiddleware, headers=HEADERS)

    @test_app.get("/json")
    async def json_route():
        return {"request_id": request_id_var.get()}

    @test_app.get("/text")
    async def text_route():
        return PlainTextResponse("plain")

    @test_app.get("/page")
    async def page_route():
        return HTMLResponse("<p>page</p>")

    return test_app


@pytest.mark.integration
class TestCORSHeadersMiddleware:
    def test_options_answered_on_any_path(self, client):
        for path in ("/api/keys", "/api/keys/key_abc12345/rotate", "/anything"):
            response = client.options(path)
            assert response.status_code == 200
            assert response.content == b""
            assert response.headers["access-control-allow-origin"] == "*"
            assert response.headers["access-control-allow-methods"] == "GET, POST, PUT, DELETE, OPTIONS"
            assert response.headers["access-control-allow-headers"] == "Content-Type, Authorization"

    def test_options_does_not_touch_store(self, client):
        client.options("/api/keys")
        assert len(client.get("/api/keys").json()["keys"]) == 3

    def test_configured_headers_on_everything_but_html(self):
        with TestClient(_make_app()) as c:
            assert c.get("/json").headers["access-control-allow-origin"] == "https://example.test"
            assert c.get("/text").headers["access-control-allow-origin"] == "https://example.test"
            assert "access-control-allow-origin" not in c.get("/page").headers


@pytest.mark.integration
class TestRequestContextMiddleware:
    def test_generates_request_id(self):
        with TestClient(_make_app()) as c:
            response = c.get("/json")
            req_id = response.headers["X-Request-ID"]
            assert req_id
            assert response.json() == {"request_id": req_id}

    def test_echoes_incoming_request_id(self):
        with TestClient(_make_app()) as c:
            response = c.get("/json", headers={"X-Request-ID": "abc-123"})
            assert response.headers["X-Request-ID"] == "abc-123"
            assert response.json() == {"request_id": "abc-123"}

    def test_request_id_on_api_errors(self, client):
        response = client.get("/api/keys/key_missing", headers={"X-Request-ID": "trace-1"})
        assert response.status_code == 404
        assert response.headers["X-Request-ID"] == "trace-1"

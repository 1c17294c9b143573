"""Shared pytest fixtures for the utilkit test suite.

* No network access; FastAPI apps are exercised through ``TestClient``.
* Environment variables are only changed through ``monkeypatch``.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from utilkit import install, respond_bad_request, respond_custom, respond_ok, to_int


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    install(app)

    @app.get("/ok")
    async def ok():
        response = Response()
        respond_ok(response, "Success", {"items": [1, 2, 3]})
        return response

    @app.get("/bad")
    async def bad():
        response = Response()
        respond_bad_request(response, "Bad Request", None)
        return response

    @app.get("/forbidden")
    async def forbidden():
        response = Response()
        respond_custom(response, 403, False, "Forbidden", None)
        return response

    @app.get("/injected")
    async def injected(response: Response):
        respond_custom(response, 202, True, "Accepted", {"a": 1})

    @app.get("/injected-returned")
    async def injected_returned(response: Response):
        respond_ok(response, "Success", {"a": 1})
        return response

    @app.get("/to-int")
    async def convert(value: str):
        response = Response()
        respond_ok(response, "converted", to_int(value))
        return response

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)

"""Tests for the JSON envelope helpers (core/http.py).

Helpers are exercised directly on ``Response`` objects and through a
FastAPI app via ``TestClient``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime

import pytest
from fastapi import Response
from fastapi.testclient import TestClient

from utilkit.core.http import build_envelope, respond_bad_request, respond_custom, respond_ok


@dataclass
class _Item:
    name: str
    created: datetime


def _payload(response: Response) -> dict:
    return json.loads(response.body)


class TestBuildEnvelope:
    def test_shape(self) -> None:
        assert build_envelope(False, "ok", {"a": 1}) == {"error": False, "message": "ok", "body": {"a": 1}}

    def test_body_is_encoded(self) -> None:
        envelope = build_envelope(False, "ok", _Item("x", datetime(2024, 1, 2, 3, 4, 5)))
        assert envelope["body"] == {"name": "x", "created": "2024-01-02T03:04:05"}


class TestRespondHelpers:
    def test_ok(self) -> None:
        response = Response()
        respond_ok(response, "Success", None)
        assert response.status_code == 200
        assert _payload(response) == {"error": False, "message": "Success", "body": None}
        assert response.headers["content-type"] == "application/json"
        assert "content-length" not in response.headers

    def test_bad_request(self) -> None:
        response = Response()
        respond_bad_request(response, "Bad Request", {"field": "name"})
        assert response.status_code == 400
        assert _payload(response) == {"error": True, "message": "Bad Request", "body": {"field": "name"}}

    def test_custom_status(self) -> None:
        response = Response()
        respond_custom(response, 403, True, "Forbidden", None)
        assert response.status_code == 403
        assert _payload(response)["error"] is True

    def test_custom_ignores_error_flag(self) -> None:
        response = Response()
        respond_custom(response, 202, False, "Accepted", None)
        assert response.status_code == 202
        assert _payload(response)["error"] is True

    @pytest.mark.parametrize("status_code", [101, 204, 304])
    def test_custom_status_without_body(self, status_code: int) -> None:
        response = Response()
        respond_custom(response, status_code, True, "No Content", {"ignored": True})
        assert response.status_code == status_code
        assert response.body == b""
        assert "content-length" not in response.headers

    def test_keeps_caller_headers(self) -> None:
        response = Response()
        response.headers["x-request-id"] = "abc"
        respond_ok(response, "Success", [1, 2])
        assert response.headers["x-request-id"] == "abc"

    def test_returns_none(self) -> None:
        assert respond_ok(Response(), "Success", None) is None


class TestRespondThroughApp:
    def test_ok(self, client: TestClient) -> None:
        resp = client.get("/ok")
        assert resp.status_code == 200
        assert resp.json() == {"error": False, "message": "Success", "body": {"items": [1, 2, 3]}}

    def test_bad_request(self, client: TestClient) -> None:
        resp = client.get("/bad")
        assert resp.status_code == 400
        assert resp.json()["error"] is True

    def test_forbidden(self, client: TestClient) -> None:
        resp = client.get("/forbidden")
        assert resp.status_code == 403
        assert resp.json() == {"error": True, "message": "Forbidden", "body": None}

    def test_injected_response_returned(self, client: TestClient) -> None:
        resp = client.get("/injected-returned")
        assert resp.status_code == 200
        assert resp.json() == {"error": False, "message": "Success", "body": {"a": 1}}
        assert resp.headers["content-type"] == "application/json"

    def test_injected_response_not_returned_keeps_status_only(self, client: TestClient) -> None:
        resp = client.get("/injected")
        assert resp.status_code == 202
        assert resp.headers.get_list("content-length") == ["4"]
        assert resp.json() is None

from typing import Any, Dict

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.utils import is_body_allowed_for_status_code


def build_envelope(error: bool, message: str, body: Any) -> Dict[str, Any]:
    """Return the ``{"error", "message", "body"}`` payload sent by the respond helpers."""
    return {
        "error": error,
        "message": message,
        "body": jsonable_encoder(body),
    }


def _write_json(response: Response, status_code: int, content: Dict[str, Any]) -> None:
    # content-length is left to the server: FastAPI copies the headers of an
    # injected Response onto its own reply, which already carries one.
    rendered = JSONResponse(content=content, status_code=status_code)
    response.status_code = rendered.status_code
    response.media_type = rendered.media_type
    response.body = rendered.body if is_body_allowed_for_status_code(status_code) else b""
    response.headers["content-type"] = rendered.headers["content-type"]
    if "content-length" in response.headers:
        del response.headers["content-length"]


def respond_bad_request(response: Response, message: str, body: Any) -> None:
    """Write a 400 envelope into ``response``; the caller returns ``response``."""
    _write_json(response, 400, build_envelope(True, message, body))


def respond_custom(response: Response, status_code: int, error: bool, message: str, body: Any) -> None:
    """Write an envelope with a caller-chosen status code.

    ``error`` is accepted but the envelope always reports ``"error": true``;
    the flag is currently ignored. Statuses that forbid a body (1xx, 204,
    304) are written without one. As with the other helpers, the body only
    reaches the client when the endpoint returns ``response``.
    """
    _write_json(response, status_code, build_envelope(True, message, body))


def respond_ok(response: Response, message: str, body: Any) -> None:
    """Write a 200 envelope into ``response``.

    The endpoint must return ``response``. With FastAPI's injected
    ``response: Response`` parameter only the status and headers are
    used unless the endpoint returns that same object::

        @app.get("/items")
        async def items(response: Response):
            respond_ok(response, "Success", load_items())
            return response
    """
    _write_json(response, 200, build_envelope(False, message, body))

import logging
import time
from typing import Callable

from fastapi import FastAPI, Request, Response

from .config import Config
from .errors import UtilkitError
from .http import respond_bad_request


logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0


def _request_label(request: Request) -> str:
    request_id = request.headers.get("x-request-id") or f"{int(time.time() * 1000)}-{id(request)}"
    return f"[{request_id}] {request.method} {request.url.path}"


async def log_requests(request: Request, call_next: Callable):
    """Log slow or failed requests.

    Requests answered by :func:`utilkit_error_handler` are logged with the
    name of the utilkit error instead of the bare status code.
    """
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception as e:
        logger.error(f"{_request_label(request)} - ERROR: {str(e)} - {time.perf_counter() - started:.2f}s")
        raise

    elapsed = time.perf_counter() - started
    utilkit_error = getattr(request.state, "utilkit_error", None)
    if utilkit_error:
        logger.info(f"{_request_label(request)} - {response.status_code} {utilkit_error} - {elapsed:.2f}s")
    elif elapsed > SLOW_REQUEST_SECONDS or response.status_code >= 400:
        logger.info(f"{_request_label(request)} - {response.status_code} - {elapsed:.2f}s")
    return response


async def utilkit_error_handler(request: Request, exc: UtilkitError) -> Response:
    """Answer an uncaught utilkit error with a 400 envelope."""
    logger.warning(f"{request.method} {request.url.path} - {type(exc).__name__}: {str(exc)}")
    request.state.utilkit_error = type(exc).__name__

    body = {"type": type(exc).__name__} if Config.is_development() else None
    response = Response()
    respond_bad_request(response, str(exc), body)
    return response


def install(app: FastAPI) -> None:
    """Register request logging and the utilkit error handler on ``app``."""

    @app.middleware("http")
    async def _log_requests(request, call_next):
        return await log_requests(request, call_next)

    app.add_exception_handler(UtilkitError, utilkit_error_handler)

"""
Request middleware: request ids, error responses, request timing
"""
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from skill_checker.utils.exceptions import SkillCheckerBaseException, map_to_http_exception
from skill_checker.utils.logging_config import get_logger

logger = get_logger(__name__)


def error_response(request_id: str, status_code: int, detail: Dict[str, Any]) -> JSONResponse:
    """Body shared by every error: success flag, timestamp, request id, status, then the detail"""
    body = {
        "success": False,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": request_id,
        "status_code": status_code,
        **detail
    }
    return JSONResponse(status_code=status_code, content=body, headers={"X-Request-ID": request_id})


class ExceptionHandlerMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an X-Request-ID and turn exceptions escaping the
    routes into JSON error responses.

    Scan failures (bad document, no skills, no upload, unknown session) are
    expected and logged as warnings; anything else is a 500 with the
    traceback logged.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except SkillCheckerBaseException as exc:
            logger.warning(
                f"{exc.error_code} on {request.method} {request.url.path}: {exc.message}",
                extra={"request_id": request_id, "details": exc.details}
            )
            http_exc = map_to_http_exception(exc)
            return error_response(request_id, http_exc.status_code, http_exc.detail)
        except Exception as exc:
            logger.error(
                f"Unhandled {exc.__class__.__name__} on {request.method} {request.url.path}: {exc}",
                extra={"request_id": request_id},
                exc_info=True
            )
            return error_response(request_id, 500, {
                "error": "Internal server error",
                "message": "An unexpected error occurred. Please try again later.",
            })

        response.headers["X-Request-ID"] = request_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request with its status and duration, flag slow
    requests, and expose the duration as X-Processing-Time.

    Bodies are never read: uploads are resume documents.
    """

    def __init__(self, app, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        request_id = getattr(request.state, 'request_id', 'unknown')

        try:
            response = await call_next(request)
        except Exception:
            logger.info(
                f"{request.method} {request.url.path} raised after {time.time() - start_time:.3f}s",
                extra={"request_id": request_id}
            )
            raise

        processing_time = time.time() - start_time
        summary = f"{request.method} {request.url.path} - {response.status_code} in {processing_time:.3f}s"
        extra = {
            "request_id": request_id,
            "processing_time": processing_time,
            "content_length": request.headers.get("content-length"),
        }
        if processing_time > self.slow_request_threshold:
            logger.warning(f"Slow request: {summary}", extra=extra)
        else:
            logger.info(summary, extra=extra)

        response.headers["X-Processing-Time"] = f"{processing_time:.3f}"
        return response

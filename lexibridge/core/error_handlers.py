"""
Error handlers for the FastAPI application.
Every failure leaves the API as a ``{status: "error", data: null, error}`` envelope.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time
from collections import Counter
from typing import Dict, Any, Optional

from lexibridge.core.exceptions import LexiBridgeException, ErrorCode

logger = logging.getLogger(__name__)

_HTTP_STATUS_CODES = {
    400: ErrorCode.VALIDATION_ERROR.value,
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    503: ErrorCode.DATA_UNAVAILABLE.value,
}

_RECENT_WINDOW_SECONDS = 3600


def _request_id(request: Request) -> str:
    return getattr(request.state, 'request_id', 'unknown')


def envelope_response(
    error_code: str,
    message: str,
    status_code: int,
    request_id: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    """
    Build the error envelope.

    The ``error`` field reads ``CODE: message``; details and the request
    id ride alongside for clients that want them.
    """
    return JSONResponse(status_code=status_code, content={
        "status": "error",
        "data": None,
        "error": f"{error_code}: {message}",
        "details": details or None,
        "request_id": request_id,
    })


class ErrorHandler:
    """Maps exceptions to envelopes and counts them per error code"""

    def __init__(self, clock=time.time):
        self._clock = clock
        self.error_counts: Counter = Counter()
        self.last_seen: Dict[str, float] = {}

    def record(self, error_code: str) -> None:
        self.error_counts[error_code] += 1
        self.last_seen[error_code] = self._clock()
        if self.error_counts[error_code] % 10 == 0:
            logger.warning(
                f"Repeated error {error_code}: {self.error_counts[error_code]} occurrences"
            )

    def get_error_statistics(self) -> Dict[str, Any]:
        now = self._clock()
        return {
            'error_counts': dict(self.error_counts),
            'recent_errors': {
                code: count for code, count in self.error_counts.items()
                if now - self.last_seen.get(code, 0) < _RECENT_WINDOW_SECONDS
            },
            'total_errors': sum(self.error_counts.values()),
        }

    async def on_service_error(self, request: Request, exc: LexiBridgeException) -> JSONResponse:
        request_id = _request_id(request)
        logger.error(
            f"{exc.error_code.value} on {request.method} {request.url.path}: {exc.message}",
            extra={'request_id': request_id, 'error_code': exc.error_code.value, 'details': exc.details},
        )
        self.record(exc.error_code.value)
        return envelope_response(
            exc.error_code.value, exc.message, exc.status_code, request_id, exc.details
        )

    async def on_validation_error(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        request_id = _request_id(request)
        problems = [
            {
                'field': '.'.join(str(part) for part in error['loc']),
                'message': error['msg'],
                'type': error['type'],
            }
            for error in exc.errors()
        ]
        logger.warning(
            f"Rejected request to {request.url.path}: {len(problems)} invalid field(s)",
            extra={'request_id': request_id, 'validation_errors': problems},
        )
        return envelope_response(
            ErrorCode.VALIDATION_ERROR.value,
            "Request validation failed",
            422,
            request_id,
            {'validation_errors': problems},
        )

    async def on_http_error(self, request: Request, exc: StarletteHTTPException) -> JSONResponse:
        request_id = _request_id(request)
        code = _HTTP_STATUS_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR.value)
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
            extra={'request_id': request_id},
        )
        return envelope_response(code, str(exc.detail), exc.status_code, request_id)

    async def on_unexpected_error(self, request: Request, exc: Exception) -> JSONResponse:
        request_id = _request_id(request)
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
            exc_info=True,
            extra={'request_id': request_id},
        )
        self.record(ErrorCode.INTERNAL_SERVER_ERROR.value)
        return envelope_response(
            ErrorCode.INTERNAL_SERVER_ERROR.value,
            "An internal server error occurred",
            500,
            request_id,
        )


error_handler = ErrorHandler()


def setup_error_handlers(app) -> None:
    """Register the envelope handlers on ``app``"""
    # FastAPI's HTTPException subclasses Starlette's, so one registration covers both
    app.add_exception_handler(LexiBridgeException, error_handler.on_service_error)
    app.add_exception_handler(RequestValidationError, error_handler.on_validation_error)
    app.add_exception_handler(StarletteHTTPException, error_handler.on_http_error)
    app.add_exception_handler(Exception, error_handler.on_unexpected_error)

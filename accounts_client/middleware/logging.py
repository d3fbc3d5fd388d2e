"""Logging hooks for request/response tracking."""

import logging
import time
import uuid
from typing import Callable, Dict, List

import httpx
import structlog

REQUEST_ID_HEADER = "X-Request-ID"
_START_TIME_KEY = "accounts_client.start_time"

SENSITIVE_HEADERS = {
    "authorization",
    "cookie",
    "x-api-key",
    "x-auth-token",
}


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured logging with JSON output."""
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, log_level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def sanitize_headers(headers) -> Dict[str, str]:
    """Remove sensitive information from headers."""
    sanitized = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            sanitized[key] = "[REDACTED]"
        else:
            sanitized[key] = value

    return sanitized


class RequestLoggingHooks:
    """
    httpx event hooks logging every exchange with structured logging.

    A request id is attached to each outbound request (``X-Request-ID``) and
    repeated on the completion log line together with the elapsed time.
    Credential headers are only logged in redacted form, and only when
    ``log_headers`` is set.
    """

    def __init__(self, logger_name: str = "accounts_client.http", log_headers: bool = False):
        self.logger = structlog.get_logger(logger_name)
        self.log_headers = log_headers

    def as_event_hooks(self) -> Dict[str, List[Callable]]:
        return {"request": [self.on_request], "response": [self.on_response]}

    async def on_request(self, request: httpx.Request) -> None:
        request_id = request.headers.get(REQUEST_ID_HEADER)
        if not request_id:
            request_id = str(uuid.uuid4())
            request.headers[REQUEST_ID_HEADER] = request_id
        request.extensions[_START_TIME_KEY] = time.perf_counter()

        request_data = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.url.params),
        }
        if self.log_headers:
            request_data["headers"] = sanitize_headers(request.headers)

        self.logger.info("HTTP request started", **request_data)

    async def on_response(self, response: httpx.Response) -> None:
        request = response.request
        started = request.extensions.get(_START_TIME_KEY)
        process_time = time.perf_counter() - started if started is not None else 0.0

        response_data = {
            "request_id": request.headers.get(REQUEST_ID_HEADER),
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time_ms": round(process_time * 1000, 2),
        }

        if 200 <= response.status_code < 400:
            self.logger.info("HTTP request completed successfully", **response_data)
        elif 400 <= response.status_code < 500:
            self.logger.warning("HTTP request completed with client error", **response_data)
        else:
            self.logger.error("HTTP request completed with server error", **response_data)

"""
Request logging middleware
"""

import json
import re
import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"

# GET /graphql carries the whole document and its variables in the query string
GRAPHQL_PAYLOAD_PARAMS = ("query", "variables", "extensions")


def loggable_query_params(path: str, params: dict[str, Any]) -> dict[str, Any] | None:
    """Query parameters safe to log, with GraphQL payloads redacted."""
    if not params:
        return None
    if path != GRAPHQL_PATH:
        return params
    return {
        key: "[REDACTED]" if key in GRAPHQL_PAYLOAD_PARAMS else value
        for key, value in params.items()
    }


def operation_name_from_payload(payload: dict[str, Any]) -> str | None:
    """Work out a GraphQL operation name from a request payload."""
    op = payload.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = payload.get("query", "")
    if not isinstance(q, str) or not q:
        return None
    if "__schema" in q or "IntrospectionQuery" in q:
        return "__introspection"

    match = re.search(r"\bquery\s+(\w+)", q)
    if match:
        return match.group(1)
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        return operation_name_from_payload(dict(request.query_params))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            if not isinstance(data, dict):
                return None
            return operation_name_from_payload(data)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Binds a request id and the viewer id to the log context of each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        bind_request_context(
            request_id=request.headers.get("x-request-id"),
            viewer_id=settings.viewer_user_id,
        )
        started = time.perf_counter()

        try:
            graphql_operation = await extract_graphql_operation_name(request)

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=loggable_query_params(
                    request.url.path, dict(request.query_params)
                ),
                graphql_operation=graphql_operation,
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                path=request.url.path,
                graphql_operation=graphql_operation,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response

        except Exception as e:
            logger.error("Request failed", path=request.url.path, error=str(e))
            raise

        finally:
            clear_request_context()

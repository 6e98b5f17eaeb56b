"""
Middleware for request context, logging and GraphQL body formats
"""

import json
import re
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qsl

import structlog
from fastapi import Request, Response
from starlette.datastructures import Headers
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .logging import bind_request_context, clear_request_context, get_logger

logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
GRAPHIQL_CONTENT_TYPE = "application/graphiql"

SENSITIVE_KEYS = {
    "password",
    "token",
    "api_key",
    "secret",
    "auth",
    "authorization",
    "access_token",
    "key",
    "session",
    "cookie",
    "credentials",
}


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact query parameters whose names look sensitive."""
    sanitized = {}
    for key, value in params.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "[REDACTED]"
        else:
            sanitized[key] = value
    return sanitized


def operation_name_from_payload(payload: dict[str, Any]) -> str | None:
    """Best-effort operation name for logging a GraphQL request."""
    op = payload.get("operationName")
    if isinstance(op, str) and op:
        return op

    q = payload.get("query", "")
    if not isinstance(q, str) or not q:
        return None
    if "__schema" in q or "IntrospectionQuery" in q:
        return "__introspection"

    match = re.search(r"\bquery\s+(\w+)", q) or re.search(r"\bmutation\s+(\w+)", q)
    if match:
        kind = "mutation:" if q.lstrip().startswith("mutation") else ""
        return f"{kind}{match.group(1)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request, graphql_path: str) -> str | None:
    if request.url.path != graphql_path:
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


def form_to_graphql_payload(body: bytes) -> dict[str, Any]:
    """Convert a url-encoded GraphQL request into the JSON payload shape.

    ``variables`` and ``extensions`` may be sent as JSON strings.
    """
    payload: dict[str, Any] = dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))
    for key in ("variables", "extensions"):
        value = payload.get(key)
        if isinstance(value, str):
            if not value:
                payload.pop(key)
                continue
            try:
                payload[key] = json.loads(value)
            except json.JSONDecodeError:
                pass
    return payload


class GraphQLBodyMiddleware:
    """Rewrite url-encoded and application/graphiql POSTs as JSON.

    The GraphQL router only understands application/json bodies; this
    middleware translates the other two accepted formats before they
    reach it.
    """

    def __init__(self, app: ASGIApp, path: str = "/graphql"):
        self.app = app
        self.path = path

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "POST" or scope["path"] != self.path:
            await self.app(scope, receive, send)
            return

        content_type = Headers(scope=scope).get("content-type", "")
        media_type = content_type.split(";")[0].strip().lower()
        if media_type not in (FORM_CONTENT_TYPE, GRAPHIQL_CONTENT_TYPE):
            await self.app(scope, receive, send)
            return

        body = await self._read_body(receive)
        if media_type == FORM_CONTENT_TYPE:
            body = json.dumps(form_to_graphql_payload(body)).encode("utf-8")

        headers = [
            (name, value)
            for name, value in scope["headers"]
            if name not in (b"content-type", b"content-length")
        ]
        headers.append((b"content-type", b"application/json"))
        headers.append((b"content-length", str(len(body)).encode("ascii")))

        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app({**scope, "headers": headers}, replay, send)

    @staticmethod
    async def _read_body(receive: Receive) -> bytes:
        chunks = []
        while True:
            message = await receive()
            chunks.append(message.get("body", b""))
            if not message.get("more_body", False):
                break
        return b"".join(chunks)


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    def __init__(self, app: ASGIApp, graphql_path: str = "/graphql"):
        super().__init__(app)
        self.graphql_path = graphql_path

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = bind_request_context()

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(dict(request.query_params))
                # Never log raw GraphQL payloads sent in the query string
                if request.url.path == self.graphql_path:
                    for k in ("query", "variables", "extensions"):
                        if k in sanitized_params:
                            sanitized_params[k] = "[REDACTED]"

            graphql_operation = await extract_graphql_operation_name(request, self.graphql_path)
            if graphql_operation:
                # Resolver and storage logs for this request carry the operation too
                structlog.contextvars.bind_contextvars(graphql_operation=graphql_operation)

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=sanitized_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()

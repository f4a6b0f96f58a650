"""
Request Body Limit

A plain ASGI middleware that caps request bodies at max_body_size bytes.

The bytes are counted as they are received, so a chunked request (or
one that lies in its Content-Length header) is rejected the same way as
one that declares an oversized body up front. Accepted bodies are
buffered and replayed to the application unchanged.
"""

import logging

from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from books_service.errors import PayloadTooLargeError, status_for
from books_service.schemas import ApiError

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware:
    """
    Reject requests whose body exceeds max_body_size with 413.

    Usage:
        app.add_middleware(BodySizeLimitMiddleware, max_body_size=4096)
    """

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        if self._declared_length(scope) > self.max_body_size:
            await self._reject(scope, receive, send)
            return

        buffered: list[Message] = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_body_size:
                await self._reject(scope, receive, send)
                return
            more_body = message.get("more_body", False)

        async def replay() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay, send)

    @staticmethod
    def _declared_length(scope: Scope) -> int:
        for name, value in scope.get("headers", []):
            if name == b"content-length" and value.isdigit():
                return int(value)
        return 0

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        error = PayloadTooLargeError(f"Request body exceeds {self.max_body_size} bytes")
        logger.warning(f"Rejected {scope['method']} {scope['path']}: {error.message}")
        response = JSONResponse(
            status_code=status_for(error),
            content=ApiError(message=error.message).model_dump(),
        )
        await response(scope, receive, send)

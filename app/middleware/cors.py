"""Permissive cross-origin policy applied in front of every route."""

from collections.abc import Sequence

from starlette.datastructures import Headers, MutableHeaders
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

ALLOW_ORIGINS = ("*",)
ALLOW_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
ALLOW_HEADERS = ("*",)


class PermissiveCORSMiddleware(CORSMiddleware):
    """Starlette's CORS middleware with unconditional pre-flight handling.

    Differences from the stock middleware:
    - every OPTIONS request is answered here with 204 and an empty body,
      whether or not it carries Origin / Access-Control-Request-Method;
    - the simple CORS headers are added to every other response, including
      requests without an Origin header.
    """

    def __init__(
        self,
        app: ASGIApp,
        allow_origins: Sequence[str] = ALLOW_ORIGINS,
        allow_methods: Sequence[str] = ALLOW_METHODS,
        allow_headers: Sequence[str] = ALLOW_HEADERS,
    ) -> None:
        super().__init__(
            app,
            allow_origins=allow_origins,
            allow_methods=allow_methods,
            allow_headers=allow_headers,
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_headers = Headers(scope=scope)

        if scope["method"] == "OPTIONS":
            response = self.empty_preflight_response(request_headers)
            await response(scope, receive, send)
            return

        if "origin" in request_headers:
            await super().__call__(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                headers = MutableHeaders(scope=message)
                headers.update(self.simple_headers)
            await send(message)

        await self.app(scope, receive, send_with_cors)

    def empty_preflight_response(self, request_headers: Headers) -> Response:
        headers = dict(self.preflight_headers)
        if self.allow_all_headers:
            headers["Access-Control-Allow-Headers"] = request_headers.get(
                "access-control-request-headers", "*"
            )
        return Response(status_code=204, headers=headers)

"""ASGI middleware that gives every request its own resolver context."""

from typing import Callable, Any
import time
import uuid

from fastapi import Request

from resolverkit.obs.context import ResolverContext, make_context, request_id_var
from resolverkit.obs.logger import log_event


class ContextMiddleware:
    """Attach a fresh ResolverContext at ``scope["state"]["context"]``.

    Handlers read it back through ``request.state.context`` (or the
    ``get_context`` dependency). Control always passes to the wrapped app.
    """

    def __init__(self, app: Callable):
        self.app = app

    async def __call__(self, scope: dict, receive: Callable, send: Callable[[dict], Any]):
        if scope.get("type") != "http":
            return await self.app(scope, receive, send)

        context = make_context()
        scope.setdefault("state", {})["context"] = context
        token = request_id_var.set(str(uuid.uuid4()))
        method = scope.get("method", "")
        path = scope.get("path", "")
        start = time.monotonic()
        status_code = 500

        async def send_wrapper(message: dict):
            nonlocal status_code
            if message.get("type") == "http.response.start":
                status_code = int(message.get("status", 200))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (time.monotonic() - start) * 1000.0
            log_event(
                "request",
                method=method,
                route=path,
                status=status_code,
                ms_total=round(elapsed_ms, 2),
                resolvers=context.resolver_metrics.summary(),
            )
            request_id_var.reset(token)


def get_context(request: Request) -> ResolverContext:
    """FastAPI dependency returning the context set up by ContextMiddleware."""
    return request.state.context

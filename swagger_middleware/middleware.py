"""
ASGI middleware serving the spec document and documentation UI
"""
import logging
from typing import Optional

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from .config import Config
from .errors import SwaggerConfigError
from .handler import SwaggerHandler, new
from .router import Route

logger = logging.getLogger(__name__)


class SwaggerMiddleware:
    """Answers requests for the spec and UI paths, forwards everything else.

    Pass a prebuilt ``handler`` (see :func:`install`) to get configuration
    errors at startup; otherwise the handler is built from ``config`` when
    Starlette assembles its middleware stack.

    The skip predicate runs before the wrapped app and shares its
    ``receive`` channel, so it must not read the request body.
    """

    def __init__(
        self,
        app: ASGIApp,
        handler: Optional[SwaggerHandler] = None,
        config: Optional[Config] = None,
        **overrides,
    ):
        if handler is not None and (config is not None or overrides):
            raise SwaggerConfigError("Pass either a prebuilt handler or a config, not both")
        self.app = app
        self.handler = handler or new(config, **overrides)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        handler = self.handler
        if handler.config.next is not None and handler.should_skip(Request(scope, receive)):
            await self.app(scope, receive, send)
            return

        path = scope["path"]
        route = handler.route(path)
        if route == Route.PASS:
            await self.app(scope, receive, send)
            return

        logger.debug("%s %s -> %s", scope.get("method"), path, route)
        if route == Route.SPEC:
            response = handler.spec_response()
        elif route == Route.UI:
            response = handler.ui_response()
        else:
            response = handler.not_found(path)
        await response(scope, receive, send)


def install(app, config: Optional[Config] = None, **overrides) -> SwaggerHandler:
    """Build the handler now and add the middleware to a Starlette/FastAPI app"""
    handler = new(config, **overrides)
    app.add_middleware(SwaggerMiddleware, handler=handler)
    return handler

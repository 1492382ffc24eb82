"""
Flask integration: the same handler wired through a before_request hook
"""
import logging
from typing import Optional

from flask import Flask, Response, request

from .config import Config
from .handler import SwaggerHandler, new
from .router import Route

logger = logging.getLogger(__name__)


def _to_flask(response) -> Response:
    return Response(
        response.body,
        status=response.status_code,
        content_type=response.headers.get("content-type"),
    )


def init_app(app: Flask, config: Optional[Config] = None, **overrides) -> SwaggerHandler:
    """Serve the spec and documentation UI from a Flask app"""
    handler = new(config, **overrides)

    @app.before_request
    def serve_swagger():
        if handler.should_skip(request):
            return None

        route = handler.route(request.path)
        if route == Route.PASS:
            return None

        logger.debug("%s %s -> %s", request.method, request.path, route)
        if route == Route.SPEC:
            return _to_flask(handler.spec_response())
        if route == Route.UI:
            return _to_flask(handler.ui_response())
        return _to_flask(handler.not_found(request.path))

    return handler

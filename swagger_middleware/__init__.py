"""
Serve an OpenAPI/Swagger spec file and its documentation UI from inside an
ASGI (Starlette/FastAPI) or Flask application.
"""
from .config import CONFIG_DEFAULT, Config
from .errors import SwaggerConfigError
from .handler import SwaggerHandler, new
from .middleware import SwaggerMiddleware, install
from .router import Route, resolve

__all__ = [
    "CONFIG_DEFAULT",
    "Config",
    "Route",
    "SwaggerConfigError",
    "SwaggerHandler",
    "SwaggerMiddleware",
    "install",
    "new",
    "resolve",
]

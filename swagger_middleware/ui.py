"""
Documentation page renderers
"""
from typing import Callable, Dict

from fastapi.openapi.docs import get_redoc_html, get_swagger_ui_html
from starlette.responses import HTMLResponse

from .errors import SwaggerConfigError

Renderer = Callable[[str, str], HTMLResponse]


def render_swagger_ui(spec_url: str, title: str) -> HTMLResponse:
    return get_swagger_ui_html(openapi_url=spec_url, title=title)


def render_redoc(spec_url: str, title: str) -> HTMLResponse:
    return get_redoc_html(openapi_url=spec_url, title=title)


RENDERERS: Dict[str, Renderer] = {
    "swagger": render_swagger_ui,
    "redoc": render_redoc,
}


def get_renderer(name: str) -> Renderer:
    try:
        return RENDERERS[name]
    except KeyError:
        raise SwaggerConfigError(f"Unknown documentation UI {name!r}") from None

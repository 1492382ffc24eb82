"""
Builds the documentation handler: loads the spec once and derives both URLs
"""
import logging
import os
from typing import Any, Optional

from starlette.responses import HTMLResponse, JSONResponse, Response

from .config import CONFIG_DEFAULT, Config
from .errors import SwaggerConfigError, error_response
from .paths import content_type_for, join_path
from .router import Route, resolve
from .ui import get_renderer

logger = logging.getLogger(__name__)


class SwaggerHandler:
    """Immutable state shared by every request: config, URLs and spec bytes"""

    def __init__(self, config: Config, raw_spec: bytes, spec_url: str, ui_url: str):
        self._config = config
        self._raw_spec = raw_spec
        self._spec_url = spec_url
        self._ui_url = ui_url
        self._content_type = content_type_for(config.file_path)
        self._render = get_renderer(config.ui)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def raw_spec(self) -> bytes:
        return self._raw_spec

    @property
    def spec_url(self) -> str:
        return self._spec_url

    @property
    def ui_url(self) -> str:
        return self._ui_url

    @property
    def content_type(self) -> str:
        return self._content_type

    def should_skip(self, request: Any) -> bool:
        return self._config.next is not None and bool(self._config.next(request))

    def route(self, path: str) -> Route:
        return resolve(path, self._spec_url, self._ui_url)

    def spec_response(self) -> Response:
        return Response(content=self._raw_spec, media_type=self._content_type)

    def ui_response(self) -> HTMLResponse:
        return self._render(self._spec_url, self._config.title)

    def not_found(self, path: str) -> JSONResponse:
        logger.error("Routing reached an unexpected branch for %s (spec %s, ui %s)", path, self._spec_url, self._ui_url)
        return error_response(404, "Not Found")


def _read_spec(file_path: str) -> bytes:
    if not os.path.isfile(file_path):
        raise SwaggerConfigError(f"{file_path} file does not exist")
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as err:
        raise SwaggerConfigError(f"Failed to read spec file {file_path}: {err}") from err


def new(config: Optional[Config] = None, **overrides) -> SwaggerHandler:
    """Create the documentation handler, raising SwaggerConfigError on bad config"""
    cfg = config or CONFIG_DEFAULT
    if overrides:
        cfg = cfg.merge(**overrides)
    cfg = cfg.with_defaults()

    raw_spec = _read_spec(cfg.file_path)

    spec_url = join_path(cfg.base_path, cfg.file_path)
    ui_url = join_path(cfg.base_path, cfg.ui_path)
    if spec_url == ui_url:
        raise SwaggerConfigError(f"Spec URL and UI URL are both {spec_url}")

    logger.info("Serving %s at %s, documentation UI at %s", cfg.file_path, spec_url, ui_url)
    return SwaggerHandler(cfg, raw_spec, spec_url, ui_url)

"""
Decides which endpoint, if any, a request path targets
"""
from enum import Enum


class Route(str, Enum):
    SPEC = "spec"
    UI = "ui"
    PASS = "pass"


def resolve(path: str, spec_url: str, ui_url: str) -> Route:
    # Exact match only: "/v2/docs" must not hit a UI mounted at "/docs"
    if path == spec_url:
        return Route.SPEC
    if path == ui_url:
        return Route.UI
    return Route.PASS

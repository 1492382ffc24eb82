"""
URL path helpers
"""
import os
import posixpath
from urllib.parse import urlsplit

from .errors import SwaggerConfigError

CONTENT_TYPES = {
    ".json": "application/json",
    ".yaml": "application/yaml",
    ".yml": "application/yaml",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def join_path(base: str, *elements: str) -> str:
    """Join a base URL path with sub-paths into one clean, rooted path.

    Duplicate slashes are collapsed and ``.``/``..`` segments resolved
    without climbing above ``/``. A trailing slash survives only when the
    last element carries one.
    """
    parts = urlsplit(base)
    if parts.scheme or parts.netloc or parts.query or parts.fragment:
        raise SwaggerConfigError(f"Base path {base!r} must be a plain URL path")
    for element in elements:
        if "?" in element or "#" in element:
            raise SwaggerConfigError(f"Cannot join {element!r} onto {base!r}")

    segments = [p.strip("/") for p in (parts.path, *elements)]
    joined = posixpath.normpath("/" + "/".join(s for s in segments if s))
    # normpath keeps a leading "//" on POSIX
    joined = "/" + joined.lstrip("/")
    if elements and elements[-1].endswith("/") and joined != "/":
        joined += "/"
    return joined


def content_type_for(file_path: str) -> str:
    """Content type of a spec document, from its file extension"""
    ext = os.path.splitext(file_path)[1].lower()
    return CONTENT_TYPES.get(ext, DEFAULT_CONTENT_TYPE)

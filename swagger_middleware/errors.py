"""
Errors raised while building the documentation handler
"""
from typing import List, Optional

from starlette.responses import JSONResponse


class SwaggerConfigError(RuntimeError):
    """Misconfigured documentation endpoint, raised before any request is served"""


def error_response(status_code: int, message: str, details: Optional[List[dict]] = None) -> JSONResponse:
    """Build the JSON error envelope used by the services"""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "error",
            "code": f"HTTP_{status_code}",
            "message": message,
            "details": details or [],
        },
    )

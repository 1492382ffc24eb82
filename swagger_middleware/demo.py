"""
Demo application - serves a spec file and its documentation UI next to a health check
"""
import logging
import os
from typing import Optional

from fastapi import FastAPI

from .config import Config
from .middleware import install

logging.basicConfig(level=logging.INFO)


def create_app(config: Optional[Config] = None) -> FastAPI:
    # FastAPI's own /docs and /openapi.json would shadow ours
    app = FastAPI(
        title="Swagger Middleware Demo",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    @app.get("/api/v1/health", tags=["Health"])
    def health_check():
        """Health check endpoint"""
        return {
            "status": "success",
            "message": "Server is healthy",
        }

    handler = install(app, config or Config.from_env())
    app.state.swagger = handler
    return app


def main():
    import uvicorn

    uvicorn.run(
        create_app(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8003)),
        log_level="info",
    )


if __name__ == "__main__":
    main()

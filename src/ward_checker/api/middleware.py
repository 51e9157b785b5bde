"""CORS middleware."""

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ward_checker.core.config import Settings


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware on the FastAPI app.

    The map front end calls the API from its own origin, so origins must
    be listed explicitly; with none configured no cross-origin request is
    allowed.

    Args:
        app: The FastAPI application.
        settings: Application settings.
    """
    kwargs: dict[str, Any] = {
        "allow_credentials": False,
        "allow_methods": ["GET", "POST"],
        "allow_headers": ["*"],
        "allow_origins": settings.cors_origin_list,
    }
    app.add_middleware(CORSMiddleware, **kwargs)

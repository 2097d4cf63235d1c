"""HTTP layer: FastAPI application and routes."""

from mdlive.api.app import create_app

__all__ = ["create_app"]

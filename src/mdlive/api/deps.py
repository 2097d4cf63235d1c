"""FastAPI dependencies."""

from fastapi import Request

from mdlive.config import ServerConfig
from mdlive.reload import ReloadPoller


def get_config(request: Request) -> ServerConfig:
    """Get the server configuration from app state."""
    return request.app.state.config


def get_poller(request: Request) -> ReloadPoller:
    """Get the reload poller from app state."""
    return request.app.state.poller

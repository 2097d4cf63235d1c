"""API route modules."""

from mdlive.api.routes import pages, reload

__all__ = ["pages", "reload"]

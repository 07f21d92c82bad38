"""REST API adapter for local front ends."""

from .app import create_app

__all__ = ["create_app"]

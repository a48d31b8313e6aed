"""REST facade over the Freelo API."""

from .app import API_PREFIX, build_rest_app

__all__ = ["API_PREFIX", "build_rest_app"]

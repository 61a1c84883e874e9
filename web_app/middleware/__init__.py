"""Middleware for the shortit web app."""

from .auth import AuthContextMiddleware
from .logging import LoggingMiddleware

__all__ = ["AuthContextMiddleware", "LoggingMiddleware"]

"""Middleware for the TinyApp web app."""

from .logging import LoggingMiddleware
from .method_override import MethodOverrideMiddleware

__all__ = ["LoggingMiddleware", "MethodOverrideMiddleware"]

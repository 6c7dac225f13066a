"""Core business logic for TinyApp."""

from .shortcode import ShortCodeGenerator
from .passwords import PasswordHasher
from .results import ErrorKind, Result, IdentifierExhaustedError
from .service import TinyAppService

__all__ = [
    "ShortCodeGenerator",
    "PasswordHasher",
    "ErrorKind",
    "Result",
    "IdentifierExhaustedError",
    "TinyAppService",
]

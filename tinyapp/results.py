"""Typed operation outcomes for the registries."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Expected, recoverable failure kinds."""
    
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    CONFLICT = "conflict"
    INVALID = "invalid"


@dataclass(frozen=True)
class Result:
    """Outcome of a registry operation: either a value or an error kind."""
    
    value: Any = None
    error: Optional[ErrorKind] = None
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)
    
    @classmethod
    def failure(cls, error: ErrorKind) -> "Result":
        return cls(error=error)


class IdentifierExhaustedError(RuntimeError):
    """Raised when no unused identifier could be generated within the retry budget."""

"""In-memory registries for links and accounts."""

from .base import LinkRegistryBase, AccountRegistryBase
from .links import InMemoryLinkRegistry
from .accounts import InMemoryAccountRegistry
from .models import LinkRecord, AccountRecord, Visit

__all__ = [
    "LinkRegistryBase",
    "AccountRegistryBase",
    "InMemoryLinkRegistry",
    "InMemoryAccountRegistry",
    "LinkRecord",
    "AccountRecord",
    "Visit",
]

"""Abstract base classes for the link and account registries."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..results import Result
from .models import AccountRecord, LinkRecord


class LinkRegistryBase(ABC):
    """Abstract base class for link storage operations."""
    
    @abstractmethod
    async def create(self, long_url: str, owner_id: str) -> str:
        """Create a new link owned by ``owner_id``.
        
        Args:
            long_url: Destination URL (stored as given)
            owner_id: Account id of the owner
            
        Returns:
            The freshly generated short id
        """
        pass
    
    @abstractmethod
    async def insert(self, record: LinkRecord) -> Result:
        """Store a prepared record under its own short id.
        
        Returns:
            Success, or CONFLICT if the short id is taken
        """
        pass
    
    @abstractmethod
    async def get(self, short_id: str) -> Optional[LinkRecord]:
        """Get a link record, or None if not found."""
        pass
    
    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[LinkRecord]:
        """List all links owned by an account."""
        pass
    
    @abstractmethod
    async def update_destination(self, short_id: str, owner_id: str, new_url: str) -> Result:
        """Replace the destination URL of a link.
        
        Returns:
            Success, or NOT_FOUND / FORBIDDEN
        """
        pass
    
    @abstractmethod
    async def delete(self, short_id: str, owner_id: str) -> Result:
        """Delete a link.
        
        Returns:
            Success, or NOT_FOUND / FORBIDDEN
        """
        pass
    
    @abstractmethod
    async def record_visit(self, short_id: str, visitor_id: str) -> Result:
        """Count a redirect traversal.
        
        Returns:
            Success carrying the destination URL, or NOT_FOUND
        """
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of stored links."""
        pass
    
    @abstractmethod
    async def total_visits(self) -> int:
        """Sum of visits across all links."""
        pass


class AccountRegistryBase(ABC):
    """Abstract base class for account storage operations."""
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[AccountRecord]:
        """Find an account by email, or None if absent."""
        pass
    
    @abstractmethod
    async def get(self, account_id: str) -> Optional[AccountRecord]:
        """Get an account by id, or None if absent."""
        pass
    
    @abstractmethod
    async def register(self, email: str, password: str) -> Result:
        """Register a new account.
        
        Returns:
            Success carrying the new account id, or CONFLICT
        """
        pass
    
    @abstractmethod
    async def verify_credentials(self, email: str, password: str) -> Result:
        """Check an email/password pair.
        
        Returns:
            Success carrying the account id, or INVALID
        """
        pass
    
    @abstractmethod
    async def count(self) -> int:
        """Number of registered accounts."""
        pass

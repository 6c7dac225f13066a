"""In-memory link registry."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..results import ErrorKind, Result
from ..shortcode import ShortCodeGenerator
from .base import LinkRegistryBase
from .ids import allocate_id
from .models import LinkRecord, Visit


class InMemoryLinkRegistry(LinkRegistryBase):
    """Link registry backed by a dict keyed on short id."""
    
    def __init__(
        self,
        generator: Optional[ShortCodeGenerator] = None,
        max_collision_retries: int = 10,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize registry.
        
        Args:
            generator: Short id generator
            max_collision_retries: Extra attempts when a generated id is taken
            logger: Optional logger instance
        """
        self.generator = generator or ShortCodeGenerator()
        self.max_collision_retries = max_collision_retries
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, LinkRecord] = {}
        self._lock = asyncio.Lock()
    
    async def create(self, long_url: str, owner_id: str) -> str:
        async with self._lock:
            short_id = allocate_id(
                self.generator, self._links, self.max_collision_retries, self.logger
            )
            self._links[short_id] = LinkRecord(
                short_id=short_id,
                long_url=long_url,
                owner_id=owner_id,
                created_at=datetime.now(timezone.utc),
            )
            return short_id
    
    async def insert(self, record: LinkRecord) -> Result:
        async with self._lock:
            if record.short_id in self._links:
                return Result.failure(ErrorKind.CONFLICT)
            self._links[record.short_id] = record
            return Result.success(record.short_id)
    
    async def get(self, short_id: str) -> Optional[LinkRecord]:
        async with self._lock:
            return self._links.get(short_id)
    
    async def list_by_owner(self, owner_id: str) -> List[LinkRecord]:
        async with self._lock:
            return [link for link in self._links.values() if link.owner_id == owner_id]
    
    async def update_destination(self, short_id: str, owner_id: str, new_url: str) -> Result:
        async with self._lock:
            link = self._links.get(short_id)
            if link is None:
                return Result.failure(ErrorKind.NOT_FOUND)
            if link.owner_id != owner_id:
                return Result.failure(ErrorKind.FORBIDDEN)
            
            link.long_url = new_url
            return Result.success(short_id)
    
    async def delete(self, short_id: str, owner_id: str) -> Result:
        async with self._lock:
            link = self._links.get(short_id)
            if link is None:
                return Result.failure(ErrorKind.NOT_FOUND)
            if link.owner_id != owner_id:
                return Result.failure(ErrorKind.FORBIDDEN)
            
            del self._links[short_id]
            return Result.success(short_id)
    
    async def record_visit(self, short_id: str, visitor_id: str) -> Result:
        async with self._lock:
            link = self._links.get(short_id)
            if link is None:
                return Result.failure(ErrorKind.NOT_FOUND)
            
            now = datetime.now(timezone.utc)
            link.total_visits += 1
            link.visit_log.append(Visit(visitor_id=visitor_id, timestamp=now))
            if visitor_id not in link.visitors:
                link.visitors[visitor_id] = now
            
            return Result.success(link.long_url)
    
    async def count(self) -> int:
        async with self._lock:
            return len(self._links)
    
    async def total_visits(self) -> int:
        async with self._lock:
            return sum(link.total_visits for link in self._links.values())

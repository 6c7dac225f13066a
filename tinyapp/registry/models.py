"""Data models for links and accounts."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List


@dataclass
class Visit:
    """A single redirect traversal."""
    
    visitor_id: str
    timestamp: datetime


@dataclass
class LinkRecord:
    """A shortened link and its visit statistics."""
    
    short_id: str
    long_url: str
    owner_id: str
    created_at: datetime
    total_visits: int = 0
    visitors: Dict[str, datetime] = field(default_factory=dict)
    visit_log: List[Visit] = field(default_factory=list)
    
    @property
    def unique_visits(self) -> int:
        """Number of distinct visitors (always the size of the visitor map)."""
        return len(self.visitors)


@dataclass
class AccountRecord:
    """A registered account. The password is only ever held as a hash."""
    
    account_id: str
    email: str
    password_hash: str
    created_at: datetime

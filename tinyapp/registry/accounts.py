"""In-memory account registry."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, Optional

from ..passwords import PasswordHasher
from ..results import ErrorKind, Result
from ..shortcode import ShortCodeGenerator
from .base import AccountRegistryBase
from .ids import allocate_id
from .models import AccountRecord


def normalize_email(email: Optional[str]) -> str:
    """Canonical form used for email comparison."""
    return (email or "").strip().lower()


class InMemoryAccountRegistry(AccountRegistryBase):
    """Account registry backed by a dict keyed on account id."""
    
    def __init__(
        self,
        hasher: Optional[PasswordHasher] = None,
        generator: Optional[ShortCodeGenerator] = None,
        max_collision_retries: int = 10,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize registry.
        
        Args:
            hasher: Password hasher
            generator: Account id generator
            max_collision_retries: Extra attempts when a generated id is taken
            logger: Optional logger instance
        """
        self.hasher = hasher or PasswordHasher()
        self.generator = generator or ShortCodeGenerator()
        self.max_collision_retries = max_collision_retries
        self.logger = logger or logging.getLogger(__name__)
        self._accounts: Dict[str, AccountRecord] = {}
        self._lock = asyncio.Lock()
    
    def _find_by_email(self, email: str) -> Optional[AccountRecord]:
        wanted = normalize_email(email)
        if not wanted:
            return None
        for account in self._accounts.values():
            if account.email == wanted:
                return account
        return None
    
    async def find_by_email(self, email: str) -> Optional[AccountRecord]:
        async with self._lock:
            return self._find_by_email(email)
    
    async def get(self, account_id: str) -> Optional[AccountRecord]:
        async with self._lock:
            return self._accounts.get(account_id)
    
    async def register(self, email: str, password: str) -> Result:
        email = normalize_email(email)
        if not email or not password or not password.strip():
            return Result.failure(ErrorKind.CONFLICT)
        
        async with self._lock:
            if self._find_by_email(email) is not None:
                return Result.failure(ErrorKind.CONFLICT)
    
        # bcrypt is CPU-bound: run it in a worker thread, outside the lock
        password_hash = await asyncio.to_thread(self.hasher.hash, password)
    
        async with self._lock:
            # The email may have been taken while hashing
            if self._find_by_email(email) is not None:
                return Result.failure(ErrorKind.CONFLICT)
    
            account_id = allocate_id(
                self.generator, self._accounts, self.max_collision_retries, self.logger
            )
            self._accounts[account_id] = AccountRecord(
                account_id=account_id,
                email=email,
                password_hash=password_hash,
                created_at=datetime.now(timezone.utc),
            )
            return Result.success(account_id)
    
    async def verify_credentials(self, email: str, password: str) -> Result:
        async with self._lock:
            account = self._find_by_email(email)
    
        if account is None:
            await asyncio.to_thread(self.hasher.burn, password or "")
            return Result.failure(ErrorKind.INVALID)
        if not password:
            return Result.failure(ErrorKind.INVALID)
        if not await asyncio.to_thread(self.hasher.verify, password, account.password_hash):
            return Result.failure(ErrorKind.INVALID)
        
        return Result.success(account.account_id)
    
    async def count(self) -> int:
        async with self._lock:
            return len(self._accounts)

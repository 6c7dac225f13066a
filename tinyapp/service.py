"""Business logic service for TinyApp."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .registry.base import AccountRegistryBase, LinkRegistryBase
from .registry.models import AccountRecord, LinkRecord
from .results import ErrorKind, Result
from .shortcode import ShortCodeGenerator


# Sample data: one demo account owning two links
DEMO_EMAIL = "user@example.com"
DEMO_PASSWORD = "purple-monkey-dinosaur"
DEMO_LINKS = {
    "b2xVn2": "http://www.lighthouselabs.ca",
    "9sm5xK": "http://www.google.com",
}


class TinyAppService:
    """Service layer over the link and account registries."""

    def __init__(
        self,
        links: LinkRegistryBase,
        accounts: AccountRegistryBase,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize service.

        Args:
            links: Link registry
            accounts: Account registry
            logger: Optional logger
        """
        self.links = links
        self.accounts = accounts
        self.logger = logger or logging.getLogger(__name__)

    # Links

    def _is_malformed(self, short_id: str) -> bool:
        # Ids are always alphanumeric, so anything else cannot be stored
        if ShortCodeGenerator.is_valid_format(short_id):
            return False
        self.logger.warning("Malformed short id: %r", short_id)
        return True

    async def create_link(self, long_url: str, owner_id: str) -> str:
        """Shorten ``long_url`` for ``owner_id`` and return the short id."""
        short_id = await self.links.create(long_url, owner_id)
        self.logger.info("Created short URL: %s -> %r (owner %s)", short_id, long_url, owner_id)
        return short_id

    async def get_link(self, short_id: str) -> Optional[LinkRecord]:
        return await self.links.get(short_id)

    async def get_owned_link(self, short_id: str, owner_id: str) -> Result:
        """Look up a link on behalf of ``owner_id``.

        Returns:
            Success carrying the record, or NOT_FOUND / FORBIDDEN
        """
        if self._is_malformed(short_id):
            return Result.failure(ErrorKind.NOT_FOUND)
        link = await self.links.get(short_id)
        if link is None:
            return Result.failure(ErrorKind.NOT_FOUND)
        if link.owner_id != owner_id:
            self.logger.warning("Account %s denied access to %s", owner_id, short_id)
            return Result.failure(ErrorKind.FORBIDDEN)
        return Result.success(link)

    async def list_links(self, owner_id: str) -> List[LinkRecord]:
        return await self.links.list_by_owner(owner_id)

    async def update_link(self, short_id: str, owner_id: str, new_url: str) -> Result:
        if self._is_malformed(short_id):
            return Result.failure(ErrorKind.NOT_FOUND)
        result = await self.links.update_destination(short_id, owner_id, new_url)
        if result.ok:
            self.logger.info("Updated short URL: %s -> %r", short_id, new_url)
        else:
            self.logger.warning("Update of %s by %s refused: %s", short_id, owner_id, result.error.value)
        return result

    async def delete_link(self, short_id: str, owner_id: str) -> Result:
        if self._is_malformed(short_id):
            return Result.failure(ErrorKind.NOT_FOUND)
        result = await self.links.delete(short_id, owner_id)
        if result.ok:
            self.logger.info("Deleted short URL: %s", short_id)
        else:
            self.logger.warning("Delete of %s by %s refused: %s", short_id, owner_id, result.error.value)
        return result

    async def visit(self, short_id: str, visitor_id: str) -> Result:
        """Count a visit and return the destination for redirecting."""
        if self._is_malformed(short_id):
            return Result.failure(ErrorKind.NOT_FOUND)
        result = await self.links.record_visit(short_id, visitor_id)
        if result.ok:
            self.logger.debug("Visit %s by %s -> %r", short_id, visitor_id, result.value)
        else:
            self.logger.warning("Short id not found: %s", short_id)
        return result

    # Accounts

    async def register(self, email: str, password: str) -> Result:
        result = await self.accounts.register(email, password)
        if result.ok:
            self.logger.info(f"Registered account {result.value}")
        else:
            self.logger.info("Registration refused: email taken or blank fields")
        return result

    async def login(self, email: str, password: str) -> Result:
        result = await self.accounts.verify_credentials(email, password)
        if result.ok:
            self.logger.info(f"Account {result.value} logged in")
        else:
            self.logger.info("Login refused: invalid credentials")
        return result

    async def get_account(self, account_id: Optional[str]) -> Optional[AccountRecord]:
        if not account_id:
            return None
        return await self.accounts.get(account_id)

    # Service

    async def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics.

        Returns:
            Dictionary with statistics
        """
        return {
            "total_links": await self.links.count(),
            "total_accounts": await self.accounts.count(),
            "total_visits": await self.links.total_visits(),
            "storage": "memory",
        }

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        try:
            await self.links.count()
            await self.accounts.count()
            registries_healthy = True
        except Exception as e:
            self.logger.error(f"Health check failed: {e}")
            registries_healthy = False

        return {
            "registries": registries_healthy,
            "overall": registries_healthy,
        }

    async def seed_demo_data(self) -> Optional[str]:
        """Create the demo account and its sample links.

        Returns:
            Demo account id, or None if the demo account already exists
        """
        result = await self.accounts.register(DEMO_EMAIL, DEMO_PASSWORD)
        if not result.ok:
            self.logger.info("Demo data already present")
            return None

        account_id = result.value
        for short_id, long_url in DEMO_LINKS.items():
            await self.links.insert(LinkRecord(
                short_id=short_id,
                long_url=long_url,
                owner_id=account_id,
                created_at=datetime.now(timezone.utc),
            ))

        self.logger.info(f"Seeded demo account {DEMO_EMAIL} with {len(DEMO_LINKS)} links")
        return account_id

    async def close(self) -> None:
        """Release resources (nothing to do for in-memory registries)."""
        self.logger.info("Service closed")

"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator, Iterable

from httpx import ASGITransport, AsyncClient

from config import Config
from tinyapp.common.logging_config import setup_logging
from tinyapp.passwords import PasswordHasher
from tinyapp.registry import InMemoryAccountRegistry, InMemoryLinkRegistry
from tinyapp.service import TinyAppService
from tinyapp.shortcode import ShortCodeGenerator
from web_app import create_app


class SequenceGenerator(ShortCodeGenerator):
    """Generator that hands out a fixed sequence of ids."""
    
    def __init__(self, codes: Iterable[str]):
        super().__init__(default_length=6)
        self._codes = iter(codes)
    
    def generate_random(self, length=None) -> str:
        return next(self._codes)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=6)


@pytest.fixture
def sequence_generator():
    """Factory for generators with a scripted id sequence."""
    return SequenceGenerator


@pytest.fixture
def hasher():
    """Cheapest bcrypt cost so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def links(short_code_generator, logger):
    return InMemoryLinkRegistry(generator=short_code_generator, logger=logger)


@pytest.fixture
def accounts(hasher, short_code_generator, logger):
    return InMemoryAccountRegistry(
        hasher=hasher,
        generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def service(links, accounts, logger) -> TinyAppService:
    """Create service instance."""
    return TinyAppService(links=links, accounts=accounts, logger=logger)


@pytest.fixture
def config():
    return Config(
        base_url="http://testserver",
        session_secret_key="test-secret-key",
        bcrypt_rounds=4,
    )


@pytest.fixture
def app(service, config, logger):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config, logger=logger)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with its own cookie jar."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
async def other_client(app) -> AsyncGenerator[AsyncClient, None]:
    """Second browser against the same app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def register_user():
    """Register through the web form; the client keeps the session cookie."""
    async def _register(client: AsyncClient, email: str, password: str = "pw1"):
        response = await client.post("/register", data={"email": email, "password": password})
        assert response.status_code == 303
        return response
    return _register


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "http://example.com",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]

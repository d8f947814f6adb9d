"""Pytest configuration and fixtures."""

import random

import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from config import Config
from shortener.idgen import ShortIDGenerator
from shortener.service import URLShortenerService
from shortener.storage.memory import MemoryStorage
from shortener.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG", dev_mode=True)


@pytest.fixture
def generator():
    """Create short id generator."""
    return ShortIDGenerator()


class FailingRandom(random.Random):
    """Random source whose entropy is unavailable."""

    def choice(self, seq):
        raise OSError("entropy source unavailable")


@pytest.fixture
def failing_rng():
    """Random source that always fails."""
    return FailingRandom()


@pytest.fixture
def storage(generator, logger) -> MemoryStorage:
    """Create in-memory storage."""
    return MemoryStorage(generator=generator, logger=logger)


@pytest.fixture
def service(storage, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(storage=storage, logger=logger)


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(base_url="http://testserver")


@pytest.fixture
def app(service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]

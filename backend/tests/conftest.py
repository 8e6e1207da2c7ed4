"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for database sessions, test clients,
mock stores, and commonly used test data.

NOTE: Heavy imports (main, models) are done lazily inside fixtures
to avoid loading the entire app for tests that don't need it.
"""

import gc
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

# Add backend directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

if TYPE_CHECKING:
    from typing import AsyncGenerator

    from httpx import AsyncClient
    from infrastructure.database import models
    from sqlalchemy.ext.asyncio import AsyncSession


# Files that use database fixtures
DB_FIXTURE_FILES = {
    "test_crud.py",
    "test_models.py",
}


def pytest_collection_modifyitems(items):
    """Auto-apply markers based on test directory and fixtures used."""
    for item in items:
        filepath = str(item.fspath)
        filename = Path(filepath).name

        if "/tests/unit/" in filepath:
            item.add_marker(pytest.mark.unit)
            if filename in DB_FIXTURE_FILES:
                item.add_marker(pytest.mark.db)
        elif "/tests/integration/" in filepath:
            item.add_marker(pytest.mark.integration)
            item.add_marker(pytest.mark.db)  # All integration tests use db


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Reset the SQLite write lock and collect garbage after each test."""
    yield
    from infrastructure.database.connection import reset_write_lock

    reset_write_lock()
    gc.collect()


# ============================================================================
# Database fixtures
# ============================================================================


@pytest.fixture(scope="function")
async def test_db() -> "AsyncGenerator[AsyncSession, None]":
    """
    Create a fresh in-memory SQLite database for each test function.

    Foreign keys are enabled so cascade rules behave as in production.
    """
    from infrastructure.database.connection import Base
    from sqlalchemy import event
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(test_engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)

    async with TestingSessionLocal() as session:
        yield session

    await test_engine.dispose()


# ============================================================================
# App/Client fixtures
# ============================================================================


def _get_app():
    """Lazy import of the FastAPI app."""
    from main import app

    return app


@pytest.fixture(scope="function")
async def client(test_db: "AsyncSession") -> "AsyncGenerator[AsyncClient, None]":
    """Create a test client backed by the in-memory test database."""
    from httpx import ASGITransport, AsyncClient
    from infrastructure.database.connection import get_db

    app = _get_app()

    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ============================================================================
# Facade fixtures
# ============================================================================


@pytest.fixture
def mock_logger():
    """Logger double handed to facades so tests can assert on warnings."""
    return MagicMock()


@pytest.fixture
def creation_date():
    return datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


# ============================================================================
# Sample data fixtures
# ============================================================================


@pytest.fixture
async def sample_folder(test_db: "AsyncSession") -> "models.Folder":
    """Create a sample folder for testing."""
    from infrastructure.database import models

    folder = models.Folder(name="TestFolder1", description="Dummy folder1")
    test_db.add(folder)
    await test_db.commit()
    await test_db.refresh(folder)
    return folder


@pytest.fixture
async def sample_deck(test_db: "AsyncSession", sample_folder: "models.Folder") -> "models.Deck":
    """Create a sample deck filed under sample_folder."""
    from infrastructure.database import models

    deck = models.Deck(name="TestDeck1", description="Dummy deck1", folder_id=sample_folder.id)
    test_db.add(deck)
    await test_db.commit()
    await test_db.refresh(deck)
    return deck


@pytest.fixture
async def sample_flashcard(test_db: "AsyncSession", sample_deck: "models.Deck") -> "models.Flashcard":
    """Create a sample flashcard in sample_deck."""
    from infrastructure.database import models

    flashcard = models.Flashcard(question="TestFlashcard1", answer="Dummy flashcard1", deck_id=sample_deck.id)
    test_db.add(flashcard)
    await test_db.commit()
    await test_db.refresh(flashcard)
    return flashcard


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Set up environment variables for settings tests."""
    from core import reset_settings

    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./test-settings.db")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("FRONTEND_URL", "https://cards.example.com")

    reset_settings()
    yield {
        "database_url": "sqlite+aiosqlite:///./test-settings.db",
        "frontend_url": "https://cards.example.com",
    }
    reset_settings()

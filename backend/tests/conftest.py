"""
Shared pytest fixtures for contact board tests.
"""
import pytest
from fastapi.testclient import TestClient

from contact_board.config.settings import Settings
from contact_board.main import create_app
from contact_board.models.base import create_engine_from_settings, init_db
from contact_board.repositories.message_repository import MessageStore
from helpers import RecordingNotifier, UnreachableStore


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'contact_board.db'}",
        ENVIRONMENT="development",
    )


@pytest.fixture
async def store(settings):
    engine = create_engine_from_settings(settings)
    assert await init_db(engine)
    message_store = MessageStore(engine)
    yield message_store
    await message_store.close()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def client(settings, notifier):
    """App on a real sqlite store with broadcasts recorded instead of sent."""
    app = create_app(settings, notifier=notifier)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def live_client(settings):
    """App with the real WebSocket notification channel."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def down_client(settings, notifier):
    """App whose store can't reach its database."""
    app = create_app(settings, store=UnreachableStore(), notifier=notifier)
    with TestClient(app) as test_client:
        yield test_client

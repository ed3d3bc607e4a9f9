"""Unit tests for src/infrastructure/database.py.

Tests cover Settings defaults, env var override, object types, and the
session dependency's commit handling.
No database connection is required.
"""

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

import src.infrastructure.database as database
from src.domain.exceptions import StorageUnavailableError
from src.infrastructure.database import AsyncSessionLocal, Base, Settings, engine, get_session


def test_settings_default_url_uses_asyncpg(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "postgresql+asyncpg" in Settings(_env_file=None).database_url


def test_settings_default_url_targets_localhost(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    assert "localhost" in Settings(_env_file=None).database_url


def test_settings_reads_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@myhost/mydb")
    assert Settings().database_url == "postgresql+asyncpg://u:p@myhost/mydb"


def test_settings_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert Settings(_env_file=None).log_level == "INFO"


def test_settings_database_echo_parses_bool(monkeypatch):
    monkeypatch.setenv("DATABASE_ECHO", "true")
    assert Settings().database_echo is True


def test_base_is_declarative_base():
    assert issubclass(Base, DeclarativeBase)


def test_engine_is_async():
    assert isinstance(engine, AsyncEngine)


def test_session_factory_produces_async_sessions():
    assert isinstance(AsyncSessionLocal, async_sessionmaker)
    assert AsyncSessionLocal.class_ is AsyncSession


# --- get_session ---

class _Transaction:
    def __init__(self, commit_error=None):
        self.commit_error = commit_error

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is None and self.commit_error is not None:
            raise self.commit_error
        return False


class _Session:
    def __init__(self, commit_error=None):
        self.transaction = _Transaction(commit_error)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    def begin(self):
        return self.transaction


async def test_get_session_yields_session_inside_transaction(monkeypatch):
    session = _Session()
    monkeypatch.setattr(database, "AsyncSessionLocal", lambda: session)
    sessions = get_session()
    assert await sessions.__anext__() is session
    with pytest.raises(StopAsyncIteration):
        await sessions.__anext__()


async def test_get_session_wraps_commit_failure(monkeypatch):
    error = OperationalError("COMMIT", {}, Exception("connection reset"))
    monkeypatch.setattr(database, "AsyncSessionLocal", lambda: _Session(error))
    sessions = get_session()
    await sessions.__anext__()
    with pytest.raises(StorageUnavailableError):
        await sessions.__anext__()

"""测试配置和 fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from adminhome.core.gallery_store import GallerySessionStore
from adminhome.db.binding import (
    BoundDatabase,
    UnboundDatabase,
    create_database_binding,
    dispose_database_binding,
)
from adminhome.db.service import DatabaseService
from adminhome.dependencies import get_database_binding
from adminhome.main import app
from tests.utils import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    """创建测试时钟."""
    return FakeClock()


@pytest.fixture
async def database_binding(tmp_path: Path) -> AsyncGenerator[BoundDatabase, None]:
    """创建测试用的 SQLite 数据库绑定."""
    binding = create_database_binding(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    assert isinstance(binding, BoundDatabase)
    yield binding
    await dispose_database_binding(binding)


@pytest.fixture
def db(database_binding: BoundDatabase) -> DatabaseService:
    """创建可用的数据库访问服务."""
    return DatabaseService(database_binding)


@pytest.fixture
def unavailable_db() -> DatabaseService:
    """创建不可用的数据库访问服务."""
    return DatabaseService(UnboundDatabase())


@pytest.fixture
async def client(
    database_binding: BoundDatabase,
) -> AsyncGenerator[AsyncClient, None]:
    """创建测试用的 HTTP 客户端（绑定测试数据库）."""
    app.dependency_overrides[get_database_binding] = lambda: database_binding
    app.state.gallery_store = GallerySessionStore()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def unavailable_client() -> AsyncGenerator[AsyncClient, None]:
    """创建测试用的 HTTP 客户端（数据库不可用）."""
    app.dependency_overrides[get_database_binding] = lambda: UnboundDatabase()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()

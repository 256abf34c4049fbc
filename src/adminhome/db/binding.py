"""数据库绑定（可用 / 不可用）."""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundDatabase:
    """已绑定的数据库连接."""

    engine: AsyncEngine


@dataclass(frozen=True)
class UnboundDatabase:
    """未绑定数据库."""

    reason: str = "Database not available"


DatabaseBinding = BoundDatabase | UnboundDatabase


def create_database_binding(database_url: str) -> DatabaseBinding:
    """根据配置创建数据库绑定，URL 为空时返回不可用."""
    if not database_url:
        logger.warning("未配置 database_url，数据库不可用")
        return UnboundDatabase()

    engine = create_async_engine(database_url, echo=False)
    logger.info(f"数据库已绑定: {engine.url.render_as_string(hide_password=True)}")
    return BoundDatabase(engine=engine)


async def dispose_database_binding(binding: DatabaseBinding) -> None:
    """释放数据库引擎."""
    if isinstance(binding, BoundDatabase):
        await binding.engine.dispose()

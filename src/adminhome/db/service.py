"""数据库访问服务.

对异步驱动的语句 API 做一层薄封装：执行语句、获取全部行、获取首行。
每次调用独立占用一个连接并提交，不做重试或事务编排。
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine

from adminhome.db.binding import BoundDatabase, DatabaseBinding

logger = logging.getLogger(__name__)


class DatabaseUnavailableError(RuntimeError):
    """数据库未绑定."""

    def __init__(self, message: str = "Database not available") -> None:
        super().__init__(message)


@dataclass
class QueryMeta:
    """语句执行元信息."""

    rows_affected: int = 0
    last_row_id: int | None = None


@dataclass
class QueryResult:
    """语句执行结果."""

    success: bool = True
    results: list[dict[str, Any]] = field(default_factory=list)
    meta: QueryMeta = field(default_factory=QueryMeta)


class DatabaseService:
    """数据库访问服务（按请求构造）."""

    def __init__(self, binding: DatabaseBinding) -> None:
        self._binding = binding

    @property
    def is_available(self) -> bool:
        """数据库是否可用."""
        return isinstance(self._binding, BoundDatabase)

    def _require_engine(self, operation: str, query: str) -> AsyncEngine:
        if not isinstance(self._binding, BoundDatabase):
            logger.warning(f"数据库不可用，无法{operation}: {query}")
            raise DatabaseUnavailableError(self._binding.reason)
        return self._binding.engine

    async def execute_query(
        self, query: str, params: Sequence[Any] = ()
    ) -> QueryResult:
        """执行语句（不返回行）."""
        engine = self._require_engine("执行语句", query)
        try:
            async with engine.begin() as conn:
                result = await conn.exec_driver_sql(query, tuple(params))
                return QueryResult(
                    meta=QueryMeta(
                        rows_affected=max(result.rowcount, 0),
                        last_row_id=result.lastrowid,
                    )
                )
        except Exception:
            logger.exception(f"数据库语句执行失败: {query}")
            raise

    async def get_all_rows(
        self, query: str, params: Sequence[Any] = ()
    ) -> QueryResult:
        """获取查询的全部行."""
        engine = self._require_engine("获取全部行", query)
        try:
            async with engine.begin() as conn:
                result = await conn.exec_driver_sql(query, tuple(params))
                rows = [dict(row) for row in result.mappings().all()]
                return QueryResult(results=rows)
        except Exception:
            logger.exception(f"数据库查询失败: {query}")
            raise

    async def get_first_row(
        self, query: str, params: Sequence[Any] = ()
    ) -> dict[str, Any] | None:
        """获取查询的首行，无结果时返回 None."""
        engine = self._require_engine("获取首行", query)
        try:
            async with engine.begin() as conn:
                result = await conn.exec_driver_sql(query, tuple(params))
                row = result.mappings().first()
                return dict(row) if row is not None else None
        except Exception:
            logger.exception(f"数据库查询失败: {query}")
            raise

"""设置页处理器 - 读取与写入复选框设置."""

import logging
import re
import time
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from adminhome.db.service import DatabaseService, DatabaseUnavailableError
from adminhome.models.setting import SettingRow

logger = logging.getLogger(__name__)

UPDATE_SETTINGS_ACTION = "updateSettings"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SettingsPageData(_CamelModel):
    """设置页加载数据."""

    is_checked: bool = False
    settings_table_name: str
    db_available: bool = False
    all_settings: list[SettingRow] = []
    error: str | None = None


class SettingsUpdateResult(_CamelModel):
    """设置写入结果."""

    success: bool
    is_checked: bool | None = None
    all_settings: list[SettingRow] | None = None
    error: str | None = None


def encode_flag(value: bool) -> str:
    """布尔值编码为存储字符串."""
    return "true" if value else "false"


def decode_flag(value: str | None) -> bool:
    """存储字符串解码为布尔值，仅 "true" 为真."""
    return value == "true"


def now_ms() -> int:
    """当前毫秒时间戳."""
    return int(time.time() * 1000)


def describe_error(error: BaseException) -> str:
    """提取异常的可读消息."""
    orig = getattr(error, "orig", None)
    if orig is not None:
        return str(orig)
    return str(error)


class SettingsPageHandler:
    """设置页处理器."""

    def __init__(
        self,
        db: DatabaseService,
        table_name: str = "example_table",
        setting_key: str = "test_checkbox",
        clock: Callable[[], int] = now_ms,
    ) -> None:
        if not _IDENTIFIER_RE.match(table_name):
            msg = f"非法的表名: {table_name!r}"
            raise ValueError(msg)
        self.db = db
        self.table_name = table_name
        self.setting_key = setting_key
        self._clock = clock

    async def ensure_schema(self) -> None:
        """创建设置表（如果不存在）."""
        await self.db.execute_query(
            f"CREATE TABLE IF NOT EXISTS {self.table_name} "
            "(key TEXT PRIMARY KEY, value TEXT, updated_at INTEGER)"
        )

    async def fetch_all_settings(self) -> list[SettingRow]:
        """获取全部设置行."""
        result = await self.db.get_all_rows(
            f"SELECT key, value, updated_at FROM {self.table_name}"
        )
        return [SettingRow.model_validate(row) for row in result.results]

    async def load(self) -> SettingsPageData:
        """加载页面数据，数据库不可用时返回默认值."""
        if not self.db.is_available:
            return SettingsPageData(settings_table_name=self.table_name)

        try:
            await self.ensure_schema()
            row = await self.db.get_first_row(
                f"SELECT value FROM {self.table_name} WHERE key = ?",
                [self.setting_key],
            )
            is_checked = decode_flag(row["value"]) if row else False
            all_settings = await self.fetch_all_settings()
        except Exception as e:
            logger.error(f"加载设置失败: {e}")
            return SettingsPageData(
                settings_table_name=self.table_name,
                error=describe_error(e),
            )

        return SettingsPageData(
            is_checked=is_checked,
            settings_table_name=self.table_name,
            db_available=True,
            all_settings=all_settings,
        )

    async def update(self, is_checked: bool) -> SettingsUpdateResult:
        """写入复选框状态并返回最新的全部设置."""
        if not self.db.is_available:
            return SettingsUpdateResult(
                success=False, error=str(DatabaseUnavailableError())
            )

        try:
            await self.ensure_schema()
            await self.db.execute_query(
                f"INSERT OR REPLACE INTO {self.table_name} "
                "(key, value, updated_at) VALUES (?, ?, ?)",
                [self.setting_key, encode_flag(is_checked), self._clock()],
            )
            all_settings = await self.fetch_all_settings()
        except Exception as e:
            logger.error(f"保存设置失败: {e}")
            return SettingsUpdateResult(success=False, error=describe_error(e))

        logger.info(f"设置已保存: {self.setting_key}={encode_flag(is_checked)}")
        return SettingsUpdateResult(
            success=True, is_checked=is_checked, all_settings=all_settings
        )

    async def handle_action(self, form: Mapping[str, Any]) -> SettingsUpdateResult:
        """分发表单动作."""
        action = form.get("action")
        if action == UPDATE_SETTINGS_ACTION:
            return await self.update(form.get("isChecked") == "true")

        logger.warning(f"未知的表单动作: {action}")
        return SettingsUpdateResult(success=False, error="Unknown action")

"""应用配置管理."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置（环境变量）."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 数据库配置（留空表示数据库不可用）
    database_url: str = "sqlite+aiosqlite:///./adminhome.db"

    # 设置页配置
    settings_table_name: str = "example_table"
    settings_key: str = "test_checkbox"

    # 管理端认证（留空则不校验）
    admin_api_token: str = ""

    # 组件展示页会话配置
    gallery_session_idle_minutes: int = 30
    gallery_prune_interval_minutes: int = 5

    # 日志配置
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> Settings:
    """获取应用配置（带缓存）."""
    return Settings()

"""设置项数据模型."""

from sqlmodel import Field, SQLModel


class SettingRow(SQLModel):
    """设置表中的一行."""

    key: str = Field(description="设置键")
    value: str | None = Field(default=None, description="设置值: true|false")
    updated_at: int | None = Field(default=None, description="写入时间（毫秒时间戳）")

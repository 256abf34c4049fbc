"""数据模型."""

from adminhome.models.setting import SettingRow

__all__ = ["SettingRow"]

"""设置页视图状态."""

from dataclasses import dataclass, field
from typing import Any

from adminhome.core.formatting import format_timestamp
from adminhome.core.notifications import Toast
from adminhome.core.settings_page import (
    UPDATE_SETTINGS_ACTION,
    SettingsPageData,
    SettingsUpdateResult,
    encode_flag,
)
from adminhome.models.setting import SettingRow

CHECKED_LABEL = "This box is checked"
UNCHECKED_LABEL = "This box is not checked"
UNAVAILABLE_NOTE = (
    "Note: Database is not available. Settings will not persist between sessions."
)
EMPTY_TABLE_MESSAGE = (
    "No data available in the database table, "
    "click the checkbox above to write test data."
)


@dataclass
class SettingsPageView:
    """设置页视图."""

    checkbox_state: bool
    db_available: bool
    settings_table_name: str
    table_data: list[SettingRow] = field(default_factory=list)
    save_error: str = ""
    submitting: bool = False
    _confirmed_state: bool = field(default=False, repr=False)

    @classmethod
    def from_page_data(cls, data: SettingsPageData) -> "SettingsPageView":
        """从加载数据构造视图."""
        return cls(
            checkbox_state=data.is_checked,
            db_available=data.db_available,
            settings_table_name=data.settings_table_name,
            table_data=list(data.all_settings),
            _confirmed_state=data.is_checked,
        )

    def toggle(self, checked: bool) -> tuple[dict[str, str] | None, Toast]:
        """
        切换复选框（乐观更新）.

        返回：(待提交的表单数据, 提示消息)，数据库不可用时表单数据为 None
        """
        self.checkbox_state = checked

        if not self.db_available:
            return None, Toast("Database not available, setting not saved")

        self.submitting = True
        form = {"action": UPDATE_SETTINGS_ACTION, "isChecked": encode_flag(checked)}
        return form, Toast("Setting saved")

    def apply_result(self, result: SettingsUpdateResult) -> None:
        """应用写入结果，失败时回滚乐观状态."""
        self.submitting = False

        if result.success:
            self.save_error = ""
            if result.is_checked is not None:
                self._confirmed_state = result.is_checked
            if result.all_settings is not None:
                self.table_data = list(result.all_settings)
            return

        self.save_error = result.error or ""
        self.checkbox_state = self._confirmed_state

    def render(self) -> dict[str, Any]:
        """渲染视图模型."""
        view: dict[str, Any] = {
            "checkbox": {
                "label": CHECKED_LABEL if self.checkbox_state else UNCHECKED_LABEL,
                "checked": self.checkbox_state,
                "disabled": self.submitting,
            },
            "error": f"Error: {self.save_error}" if self.save_error else None,
            "note": None if self.db_available else UNAVAILABLE_NOTE,
            "table_name": self.settings_table_name,
            "rows": [
                {
                    "key": row.key,
                    "value": row.value,
                    "updated_at": format_timestamp(row.updated_at),
                }
                for row in self.table_data
            ],
        }
        view["empty_message"] = None if view["rows"] else EMPTY_TABLE_MESSAGE
        return view

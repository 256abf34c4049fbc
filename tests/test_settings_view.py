"""测试设置页视图状态."""

from datetime import datetime

from adminhome.core.formatting import format_clock_time, format_timestamp
from adminhome.core.settings_page import SettingsPageData, SettingsUpdateResult
from adminhome.core.settings_view import (
    CHECKED_LABEL,
    EMPTY_TABLE_MESSAGE,
    UNAVAILABLE_NOTE,
    UNCHECKED_LABEL,
    SettingsPageView,
)
from adminhome.models.setting import SettingRow


def make_view(is_checked: bool = False, db_available: bool = True) -> SettingsPageView:
    data = SettingsPageData(
        is_checked=is_checked,
        settings_table_name="example_table",
        db_available=db_available,
    )
    return SettingsPageView.from_page_data(data)


class TestFormatting:
    """测试时间格式化."""

    def test_clock_time_afternoon(self) -> None:
        assert format_clock_time(datetime(2025, 1, 2, 15, 4, 5)) == "3:04:05 PM"

    def test_clock_time_midnight_and_noon(self) -> None:
        assert format_clock_time(datetime(2025, 1, 2, 0, 0, 7)) == "12:00:07 AM"
        assert format_clock_time(datetime(2025, 1, 2, 12, 30, 0)) == "12:30:00 PM"

    def test_timestamp_uses_local_time(self) -> None:
        ts = 1_700_000_000_000
        dt = datetime.fromtimestamp(ts / 1000)
        expected = f"{dt.month}/{dt.day}/{dt.year}, {format_clock_time(dt)}"
        assert format_timestamp(ts) == expected
        assert format_timestamp(str(ts)) == expected

    def test_missing_timestamp(self) -> None:
        assert format_timestamp(None) == ""


class TestRender:
    """测试渲染."""

    def test_unchecked_empty_table(self) -> None:
        rendered = make_view().render()
        assert rendered["checkbox"] == {
            "label": UNCHECKED_LABEL,
            "checked": False,
            "disabled": False,
        }
        assert rendered["rows"] == []
        assert rendered["empty_message"] == EMPTY_TABLE_MESSAGE
        assert rendered["error"] is None
        assert rendered["note"] is None

    def test_checked_with_rows(self) -> None:
        view = make_view(is_checked=True)
        view.table_data = [
            SettingRow(key="test_checkbox", value="true", updated_at=1_700_000_000_000)
        ]
        rendered = view.render()
        assert rendered["checkbox"]["label"] == CHECKED_LABEL
        assert rendered["rows"] == [
            {
                "key": "test_checkbox",
                "value": "true",
                "updated_at": format_timestamp(1_700_000_000_000),
            }
        ]
        assert rendered["empty_message"] is None

    def test_unavailable_note(self) -> None:
        rendered = make_view(db_available=False).render()
        assert rendered["note"] == UNAVAILABLE_NOTE


class TestToggle:
    """测试切换与提交结果."""

    def test_toggle_submits_form_and_disables_checkbox(self) -> None:
        view = make_view()
        form, toast = view.toggle(True)

        assert form == {"action": "updateSettings", "isChecked": "true"}
        assert toast.message == "Setting saved"
        assert view.checkbox_state is True
        assert view.render()["checkbox"]["disabled"] is True

    def test_toggle_without_database_keeps_local_state(self) -> None:
        view = make_view(db_available=False)
        form, toast = view.toggle(True)

        assert form is None
        assert toast.message == "Database not available, setting not saved"
        assert view.checkbox_state is True
        assert view.submitting is False

    def test_success_replaces_table_and_clears_error(self) -> None:
        view = make_view()
        view.save_error = "old"
        view.toggle(True)

        rows = [SettingRow(key="test_checkbox", value="true", updated_at=1)]
        view.apply_result(
            SettingsUpdateResult(success=True, is_checked=True, all_settings=rows)
        )

        assert view.submitting is False
        assert view.save_error == ""
        assert view.table_data == rows
        assert view.checkbox_state is True

    def test_failure_shows_error_and_rolls_back(self) -> None:
        """写入失败时显示错误并恢复到最后一次确认的状态."""
        view = make_view(is_checked=False)
        view.toggle(True)

        view.apply_result(SettingsUpdateResult(success=False, error="disk I/O error"))

        assert view.checkbox_state is False
        assert view.submitting is False
        rendered = view.render()
        assert rendered["error"] == "Error: disk I/O error"
        assert rendered["checkbox"]["label"] == UNCHECKED_LABEL

    def test_rollback_targets_last_confirmed_write(self) -> None:
        view = make_view(is_checked=False)
        view.toggle(True)
        view.apply_result(SettingsUpdateResult(success=True, is_checked=True))

        view.toggle(False)
        view.apply_result(SettingsUpdateResult(success=False, error="boom"))

        assert view.checkbox_state is True

"""组件展示页视图状态.

每个组件（横幅、Toast、加载按钮、姓名表单弹窗）由本地状态驱动，
交互时同步更新组件状态表。状态只存在于单个视图会话中。
"""

import logging
from collections.abc import Callable
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta
from functools import cmp_to_key
from typing import Any, Literal

from adminhome.core.formatting import format_clock_time
from adminhome.core.notifications import Toast

logger = logging.getLogger(__name__)

BANNER_ID = "banner"
TOAST_ID = "toast"
MODAL_ID = "modal"

TOAST_DURATION_MS = 4000
SPINNER_DURATION_MS = 3000
EMPTY_NAME_TOAST_MS = 2000

SEED_COMPONENTS = (
    (BANNER_ID, "Banner Notification"),
    (TOAST_ID, "Toast Notification"),
    (MODAL_ID, "Name Form Modal"),
)

SORTABLE_COLUMNS = ("name", "status", "time")

SortDirection = Literal["asc", "desc"]


class ComponentStatus:
    """组件状态枚举."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"
    SUBMITTED = "Submitted"


def badge_tone(status: str) -> str:
    """状态徽章色调."""
    if status in (ComponentStatus.ACTIVE, ComponentStatus.SUBMITTED):
        return "success"
    return "neutral"


@dataclass
class StatusEntry:
    """组件状态表的一行."""

    id: str
    name: str
    status: str
    time: str


@dataclass
class SubmittedName:
    """弹窗表单提交的姓名."""

    name: str
    time: str


@dataclass
class SortConfig:
    """排序配置."""

    key: str | None = None
    direction: SortDirection = "asc"


@dataclass
class _Timers:
    toast_until: datetime | None = None
    spinner_until: datetime | None = None


class ComponentGallery:
    """组件展示页."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        now = clock()
        mounted_at = format_clock_time(now)

        self.show_banner = False
        self.toast_checked = False
        self.show_spinner = False
        self.button_loading = False
        self.modal_open = False
        self.name_input = ""
        self.submitted_names: list[SubmittedName] = []
        self.component_status: list[StatusEntry] = [
            StatusEntry(entry_id, name, ComponentStatus.INACTIVE, mounted_at)
            for entry_id, name in SEED_COMPONENTS
        ]
        self.sort_config = SortConfig()
        self.last_active = now

        self._timers = _Timers()
        self._notifications: list[Toast] = []

    # ---- 内部工具 ----

    def _touch(self) -> datetime:
        """刷新到期的定时状态，返回当前时间."""
        now = self._clock()
        self.last_active = now

        toast_until = self._timers.toast_until
        if toast_until is not None and now >= toast_until:
            self._timers.toast_until = None
            self.toast_checked = False
            self._update_status(TOAST_ID, ComponentStatus.INACTIVE, toast_until)

        spinner_until = self._timers.spinner_until
        if spinner_until is not None and now >= spinner_until:
            self._timers.spinner_until = None
            self.show_spinner = False
            self.button_loading = False

        return now

    def _update_status(self, entry_id: str, status: str, at: datetime) -> None:
        for entry in self.component_status:
            if entry.id == entry_id:
                entry.status = status
                entry.time = format_clock_time(at)

    def _next_submission_id(self, now: datetime) -> str:
        base = f"submitted-{int(now.timestamp() * 1000)}"
        existing = {entry.id for entry in self.component_status}
        entry_id = base
        suffix = 1
        while entry_id in existing:
            suffix += 1
            entry_id = f"{base}-{suffix}"
        return entry_id

    # ---- 横幅 ----

    def set_banner(self, checked: bool) -> None:
        """勾选/取消横幅复选框."""
        now = self._touch()
        self.show_banner = checked
        status = ComponentStatus.ACTIVE if checked else ComponentStatus.INACTIVE
        self._update_status(BANNER_ID, status, now)

    def dismiss_banner(self) -> None:
        """关闭横幅（同时取消勾选）."""
        now = self._touch()
        self.show_banner = False
        self._update_status(BANNER_ID, ComponentStatus.INACTIVE, now)

    # ---- Toast ----

    def set_toast(self, checked: bool) -> None:
        """勾选/取消 Toast 复选框，勾选后到期自动取消."""
        now = self._touch()
        self.toast_checked = checked
        status = ComponentStatus.ACTIVE if checked else ComponentStatus.INACTIVE
        self._update_status(TOAST_ID, status, now)

        if checked:
            self._notifications.append(
                Toast("Action completed successfully!", duration=TOAST_DURATION_MS)
            )
            self._timers.toast_until = now + timedelta(milliseconds=TOAST_DURATION_MS)
        else:
            self._timers.toast_until = None

    # ---- 加载按钮 ----

    def click_spinner(self) -> None:
        """显示加载指示器，到期自动隐藏."""
        now = self._touch()
        self.show_spinner = True
        self.button_loading = True
        self._timers.spinner_until = now + timedelta(milliseconds=SPINNER_DURATION_MS)

    # ---- 弹窗表单 ----

    def open_modal(self) -> None:
        now = self._touch()
        self.modal_open = True
        self._update_status(MODAL_ID, ComponentStatus.ACTIVE, now)

    def close_modal(self) -> None:
        now = self._touch()
        self.modal_open = False
        self._update_status(MODAL_ID, ComponentStatus.INACTIVE, now)

    def set_name_input(self, value: str) -> None:
        self._touch()
        self.name_input = value

    def save_name(self) -> bool:
        """
        保存输入的姓名.

        输入为空（或仅空白）时提示错误并保持弹窗打开，返回 False
        """
        now = self._touch()
        name = self.name_input.strip()
        if not name:
            self._notifications.append(
                Toast(
                    "Please enter a name before saving",
                    duration=EMPTY_NAME_TOAST_MS,
                    tone="critical",
                )
            )
            return False

        submitted_at = format_clock_time(now)
        self.submitted_names.append(SubmittedName(name=name, time=submitted_at))
        self.component_status.append(
            StatusEntry(
                id=self._next_submission_id(now),
                name=f"Submitted Name: {name}",
                status=ComponentStatus.SUBMITTED,
                time=submitted_at,
            )
        )
        logger.debug(f"已提交姓名: {name}")

        self.name_input = ""
        self.close_modal()
        return True

    def cancel_modal(self) -> None:
        """取消输入并关闭弹窗."""
        self._touch()
        self.name_input = ""
        self.close_modal()

    # ---- 状态表排序 ----

    def sort_by(self, key: str) -> SortConfig:
        """按列排序，同列再次点击切换方向."""
        if key not in SORTABLE_COLUMNS:
            msg = f"不支持的排序列: {key}"
            raise ValueError(msg)

        self._touch()
        direction: SortDirection = "asc"
        if self.sort_config.key == key and self.sort_config.direction == "asc":
            direction = "desc"
        self.sort_config = SortConfig(key=key, direction=direction)
        return self.sort_config

    def sorted_status(self) -> list[StatusEntry]:
        """排序后的组件状态（值相同时保持原顺序）."""
        key = self.sort_config.key
        if key is None:
            return list(self.component_status)

        sign = 1 if self.sort_config.direction == "asc" else -1

        def compare(a: StatusEntry, b: StatusEntry) -> int:
            left, right = getattr(a, key), getattr(b, key)
            if left < right:
                return -sign
            if left > right:
                return sign
            return 0

        return sorted(self.component_status, key=cmp_to_key(compare))

    def sort_icon(self, column: str) -> str:
        if self.sort_config.key != column:
            return "select"
        return "arrow-up" if self.sort_config.direction == "asc" else "arrow-down"

    # ---- 快照 ----

    def drain_notifications(self) -> list[Toast]:
        notifications, self._notifications = self._notifications, []
        return notifications

    def snapshot(self) -> dict[str, Any]:
        """当前视图模型（会取走待发送的提示）."""
        self._touch()
        return {
            "banner": {"visible": self.show_banner},
            "toast": {"checked": self.toast_checked},
            "spinner": {
                "visible": self.show_spinner,
                "button_loading": self.button_loading,
            },
            "modal": {"open": self.modal_open, "name_input": self.name_input},
            "submitted_names": [asdict(item) for item in self.submitted_names],
            "component_status": [
                {**asdict(entry), "tone": badge_tone(entry.status)}
                for entry in self.sorted_status()
            ],
            "sort": {
                "key": self.sort_config.key,
                "direction": self.sort_config.direction,
                "icons": {
                    column: self.sort_icon(column) for column in SORTABLE_COLUMNS
                },
            },
            "notifications": [toast.to_dict() for toast in self.drain_notifications()],
        }

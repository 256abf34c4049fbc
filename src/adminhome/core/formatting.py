"""显示用时间格式化."""

from datetime import datetime


def format_clock_time(dt: datetime) -> str:
    """格式化为 12 小时制时间，例如 3:04:05 PM."""
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"


def format_timestamp(timestamp: int | str | None) -> str:
    """毫秒时间戳格式化为本地日期时间，例如 1/2/2025, 3:04:05 PM."""
    if timestamp is None or timestamp == "":
        return ""
    dt = datetime.fromtimestamp(int(timestamp) / 1000)
    return f"{dt.month}/{dt.day}/{dt.year}, {format_clock_time(dt)}"

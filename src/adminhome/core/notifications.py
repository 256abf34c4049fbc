"""提示消息模型."""

from dataclasses import asdict, dataclass
from typing import Any, Literal


@dataclass(frozen=True)
class Toast:
    """Toast 提示."""

    message: str
    duration: int = 5000  # 毫秒
    tone: Literal["default", "critical"] = "default"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

"""组件展示页会话存储（内存）."""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timedelta

from adminhome.core.gallery import ComponentGallery

logger = logging.getLogger(__name__)


class GallerySessionNotFound(KeyError):
    """视图会话不存在或已过期."""


class GallerySessionStore:
    """按视图会话保存组件展示页状态."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock
        self._sessions: dict[str, ComponentGallery] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> tuple[str, ComponentGallery]:
        """挂载新视图."""
        session_id = uuid.uuid4().hex
        gallery = ComponentGallery(clock=self._clock)
        self._sessions[session_id] = gallery
        logger.debug(f"创建展示页会话: {session_id}")
        return session_id, gallery

    def get(self, session_id: str) -> ComponentGallery:
        gallery = self._sessions.get(session_id)
        if gallery is None:
            raise GallerySessionNotFound(session_id)
        return gallery

    def discard(self, session_id: str) -> bool:
        """卸载视图，状态随之丢弃."""
        return self._sessions.pop(session_id, None) is not None

    def prune_idle(self, max_idle: timedelta) -> int:
        """清理空闲超时的会话，返回清理数量."""
        cutoff = self._clock() - max_idle
        stale = [
            session_id
            for session_id, gallery in self._sessions.items()
            if gallery.last_active < cutoff
        ]
        for session_id in stale:
            del self._sessions[session_id]

        if stale:
            logger.info(f"已清理 {len(stale)} 个空闲展示页会话")
        return len(stale)

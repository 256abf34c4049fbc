"""定时任务定义."""

import logging
from datetime import timedelta

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from adminhome.config import Settings
from adminhome.core.gallery_store import GallerySessionStore

logger = logging.getLogger(__name__)

_scheduler: AsyncIOScheduler | None = None


async def prune_gallery_sessions_task(
    store: GallerySessionStore, settings: Settings
) -> None:
    """清理空闲的展示页会话."""
    max_idle = timedelta(minutes=settings.gallery_session_idle_minutes)
    pruned = store.prune_idle(max_idle)
    logger.debug(f"展示页会话清理完成: 清理={pruned}, 剩余={len(store)}")


def create_scheduler(store: GallerySessionStore, settings: Settings) -> AsyncIOScheduler:
    """创建并启动定时任务调度器."""
    global _scheduler

    _scheduler = AsyncIOScheduler()

    _scheduler.add_job(
        prune_gallery_sessions_task,
        "interval",
        minutes=settings.gallery_prune_interval_minutes,
        args=[store, settings],
        id="prune_gallery_sessions",
        name="清理空闲展示页会话",
        replace_existing=True,
    )

    _scheduler.start()
    logger.info(
        f"定时任务调度器已启动，会话清理间隔: "
        f"{settings.gallery_prune_interval_minutes} 分钟"
    )

    return _scheduler


async def shutdown_scheduler() -> None:
    """关闭定时任务调度器."""
    global _scheduler
    if _scheduler:
        _scheduler.shutdown(wait=False)
        logger.info("定时任务调度器已关闭")
        _scheduler = None

"""adminhome 主应用入口."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adminhome.api import gallery, settings_page
from adminhome.config import get_settings
from adminhome.core.gallery_store import GallerySessionStore
from adminhome.db.binding import (
    BoundDatabase,
    DatabaseBinding,
    create_database_binding,
    dispose_database_binding,
)
from adminhome.dependencies import get_database_binding
from adminhome.scheduler import create_scheduler, shutdown_scheduler

# 配置日志
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """应用生命周期管理."""
    app_settings = get_settings()

    # 启动时初始化
    logger.info("正在绑定数据库...")
    app.state.database = create_database_binding(app_settings.database_url)

    app.state.gallery_store = GallerySessionStore()

    logger.info("正在启动定时任务...")
    create_scheduler(app.state.gallery_store, app_settings)

    logger.info("adminhome 启动完成！")
    yield

    # 关闭时清理
    logger.info("正在关闭...")
    await shutdown_scheduler()
    await dispose_database_binding(app.state.database)
    logger.info("adminhome 已关闭")


app = FastAPI(
    title="adminhome",
    description="嵌入式管理后台示例应用 - 数据库设置页与组件展示页",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 生产环境应该限制具体域名
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 注册路由
app.include_router(settings_page.router)
app.include_router(gallery.router)


@app.get("/")
async def root() -> dict:
    """根路径."""
    return {
        "name": "adminhome",
        "version": "0.1.0",
        "description": "嵌入式管理后台示例应用",
        "pages": ["/app/d1example", "/app/web-components"],
    }


@app.get("/health")
async def health(
    binding: DatabaseBinding = Depends(get_database_binding),
) -> dict:
    """健康检查."""
    available = isinstance(binding, BoundDatabase)
    return {
        "status": "ok",
        "database": "available" if available else "unavailable",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "adminhome.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )

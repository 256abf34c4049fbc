"""FastAPI 依赖注入."""

import logging
import secrets

from fastapi import Depends, Header, HTTPException, Request, status

from adminhome.config import Settings, get_settings
from adminhome.core.gallery_store import GallerySessionStore
from adminhome.core.settings_page import SettingsPageHandler
from adminhome.db.binding import DatabaseBinding, UnboundDatabase
from adminhome.db.service import DatabaseService

logger = logging.getLogger(__name__)


def authenticate_admin(
    authorization: str | None = Header(None, alias="Authorization"),
    settings: Settings = Depends(get_settings),
) -> None:
    """校验管理端令牌（未配置令牌时放行）."""
    expected = settings.admin_api_token
    if not expected:
        return

    token = ""
    if authorization:
        token = (
            authorization.split(" ", 1)[1]
            if authorization.startswith("Bearer ")
            else authorization
        )

    if not secrets.compare_digest(token.encode(), expected.encode()):
        logger.warning("管理端认证失败")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_database_binding(request: Request) -> DatabaseBinding:
    """获取应用级数据库绑定."""
    return getattr(request.app.state, "database", None) or UnboundDatabase()


def get_database(
    binding: DatabaseBinding = Depends(get_database_binding),
) -> DatabaseService:
    """按请求构造数据库访问服务."""
    return DatabaseService(binding)


def get_settings_handler(
    db: DatabaseService = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> SettingsPageHandler:
    """构造设置页处理器."""
    return SettingsPageHandler(
        db,
        table_name=settings.settings_table_name,
        setting_key=settings.settings_key,
    )


def get_gallery_store(request: Request) -> GallerySessionStore:
    """获取展示页会话存储."""
    store = getattr(request.app.state, "gallery_store", None)
    if store is None:
        store = GallerySessionStore()
        request.app.state.gallery_store = store
    return store

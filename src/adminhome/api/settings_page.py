"""设置页 API."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from adminhome.core.settings_page import (
    SettingsPageData,
    SettingsPageHandler,
    SettingsUpdateResult,
)
from adminhome.core.settings_view import SettingsPageView
from adminhome.dependencies import authenticate_admin, get_settings_handler

router = APIRouter(
    prefix="/app/d1example",
    tags=["settings-page"],
    dependencies=[Depends(authenticate_admin)],
)


@router.get("", response_model_exclude_none=True)
async def load_settings_page(
    handler: SettingsPageHandler = Depends(get_settings_handler),
) -> SettingsPageData:
    """加载设置页数据."""
    return await handler.load()


@router.post("", response_model_exclude_none=True)
async def submit_settings_form(
    request: Request,
    handler: SettingsPageHandler = Depends(get_settings_handler),
) -> SettingsUpdateResult:
    """处理设置页表单提交."""
    form = await request.form()
    return await handler.handle_action(form)


@router.get("/view")
async def render_settings_page(
    handler: SettingsPageHandler = Depends(get_settings_handler),
) -> dict[str, Any]:
    """渲染设置页视图模型."""
    data = await handler.load()
    view = SettingsPageView.from_page_data(data)
    rendered = view.render()
    rendered["db_available"] = data.db_available
    if data.error:
        rendered["load_error"] = data.error
    return rendered

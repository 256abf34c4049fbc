"""组件展示页 API."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel

from adminhome.core.gallery import ComponentGallery
from adminhome.core.gallery_store import GallerySessionNotFound, GallerySessionStore
from adminhome.dependencies import authenticate_admin, get_gallery_store

router = APIRouter(
    prefix="/app/web-components/sessions",
    tags=["gallery"],
    dependencies=[Depends(authenticate_admin)],
)


class ToggleRequest(BaseModel):
    """复选框切换请求."""

    checked: bool


class NameInputRequest(BaseModel):
    """姓名输入请求."""

    value: str


class SortRequest(BaseModel):
    """排序请求."""

    key: str


def get_gallery(
    session_id: str,
    store: GallerySessionStore = Depends(get_gallery_store),
) -> ComponentGallery:
    """根据会话 ID 获取展示页状态."""
    try:
        return store.get(session_id)
    except GallerySessionNotFound:
        raise HTTPException(status_code=404, detail="展示页会话不存在") from None


@router.post("", status_code=status.HTTP_201_CREATED)
async def mount_gallery(
    store: GallerySessionStore = Depends(get_gallery_store),
) -> dict[str, Any]:
    """挂载新的展示页视图."""
    session_id, gallery = store.create()
    return {"session_id": session_id, **gallery.snapshot()}


@router.get("/{session_id}")
async def get_gallery_state(
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    """获取展示页当前状态."""
    return gallery.snapshot()


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def unmount_gallery(
    session_id: str,
    store: GallerySessionStore = Depends(get_gallery_store),
) -> Response:
    """卸载展示页视图."""
    if not store.discard(session_id):
        raise HTTPException(status_code=404, detail="展示页会话不存在")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{session_id}/banner")
async def toggle_banner(
    request: ToggleRequest,
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    """切换横幅."""
    gallery.set_banner(request.checked)
    return gallery.snapshot()


@router.post("/{session_id}/banner/dismiss")
async def dismiss_banner(
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    """关闭横幅."""
    gallery.dismiss_banner()
    return gallery.snapshot()


@router.post("/{session_id}/toast")
async def toggle_toast(
    request: ToggleRequest,
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    """切换 Toast."""
    gallery.set_toast(request.checked)
    return gallery.snapshot()


@router.post("/{session_id}/spinner")
async def click_spinner(
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    """点击加载按钮."""
    gallery.click_spinner()
    return gallery.snapshot()


@router.post("/{session_id}/modal/open")
async def open_modal(
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    gallery.open_modal()
    return gallery.snapshot()


@router.post("/{session_id}/modal/close")
async def close_modal(
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    gallery.close_modal()
    return gallery.snapshot()


@router.post("/{session_id}/modal/input")
async def set_name_input(
    request: NameInputRequest,
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    gallery.set_name_input(request.value)
    return gallery.snapshot()


@router.post("/{session_id}/modal/save")
async def save_name(
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    """保存弹窗表单中的姓名."""
    saved = gallery.save_name()
    return {"saved": saved, **gallery.snapshot()}


@router.post("/{session_id}/modal/cancel")
async def cancel_modal(
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    gallery.cancel_modal()
    return gallery.snapshot()


@router.post("/{session_id}/sort")
async def sort_status_table(
    request: SortRequest,
    gallery: ComponentGallery = Depends(get_gallery),
) -> dict[str, Any]:
    """按列排序组件状态表."""
    try:
        gallery.sort_by(request.key)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return gallery.snapshot()

"""核心业务逻辑."""

from adminhome.core.gallery import ComponentGallery
from adminhome.core.gallery_store import GallerySessionNotFound, GallerySessionStore
from adminhome.core.settings_page import (
    SettingsPageData,
    SettingsPageHandler,
    SettingsUpdateResult,
)
from adminhome.core.settings_view import SettingsPageView

__all__ = [
    "ComponentGallery",
    "GallerySessionNotFound",
    "GallerySessionStore",
    "SettingsPageData",
    "SettingsPageHandler",
    "SettingsPageView",
    "SettingsUpdateResult",
]

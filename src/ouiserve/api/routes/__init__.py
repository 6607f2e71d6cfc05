from __future__ import annotations

from .oui import get_registry, mount_oui_api

__all__ = ["get_registry", "mount_oui_api"]

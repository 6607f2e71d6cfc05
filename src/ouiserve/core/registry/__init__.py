from __future__ import annotations

from .service import OuiRegistry

__all__ = ["OuiRegistry"]

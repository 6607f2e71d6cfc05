from __future__ import annotations

from .client import OuiClient

__all__ = ["OuiClient"]

from __future__ import annotations

from .entries import entries_to_items, entry_to_item

__all__ = ["entry_to_item", "entries_to_items"]

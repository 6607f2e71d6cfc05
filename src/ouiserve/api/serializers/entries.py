from __future__ import annotations

from typing import Any

from ...core.entries import OuiEntry


def entry_to_item(entry: OuiEntry) -> dict[str, Any]:
    return entry.to_dict()


def entries_to_items(entries: list[OuiEntry]) -> list[dict[str, Any]]:
    return [entry_to_item(e) for e in entries]

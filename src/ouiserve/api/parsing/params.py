from __future__ import annotations

from typing import Any

from ...core.addressing import normalize_prefix


def parse_prefix_param(value: Any) -> str:
    """Normalize an OUI path parameter before exact lookup.

    Delimiters and inner spaces are dropped and the result is uppercased, so
    `ac-de-48`, `AC:DE:48` and `AC DE48` all address the same entry.
    """

    return normalize_prefix(value)


def parse_origins(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        items = str(value).split(",")
    return [o.strip() for o in items if o.strip()]

from __future__ import annotations

import re
from typing import Any

from .entries import PREFIX_LENGTH

ADDRESS_LENGTH = 12

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def normalize_address(value: Any) -> str:
    """Strip every character that is not an ASCII letter or digit."""
    if value is None:
        return ""
    return _NON_ALNUM.sub("", str(value))


def prefix_from_address(value: Any) -> str | None:
    """Return the uppercase 6-character prefix of a full 48-bit address.

    Accepts dash-, colon-, dot-separated or bare hex. Returns None when the
    normalized address is not exactly 12 characters long.
    """

    norm = normalize_address(value)
    if len(norm) != ADDRESS_LENGTH:
        return None
    return norm[:PREFIX_LENGTH].upper()


def normalize_prefix(value: Any) -> str:
    # "AC DE48", "ac-de-48" and "AC:DE:48" all map to "ACDE48".
    return normalize_address(value).upper()

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

PREFIX_LENGTH = 6
# Parsed prefixes must fit in a 48-bit address space.
_MAX_PREFIX_VALUE = 1 << 48

_HEX_PREFIX = re.compile(r"[0-9A-F]{6}")


def parse_prefix(value: str) -> str:
    """Validate a compact base-16 prefix and return its canonical (uppercase) form.

    Raises ValueError for anything that is not exactly 6 hex digits.
    """

    p = str(value).replace(" ", "").replace("\t", "").upper()
    if len(p) != PREFIX_LENGTH:
        raise ValueError(f"OUI must be {PREFIX_LENGTH} hex characters, got {value!r}")
    # int() alone would also accept signs, "0x" and underscores.
    if not _HEX_PREFIX.fullmatch(p):
        raise ValueError(f"Unable to parse OUI {value!r}")
    n = int(p, 16)
    if n >= _MAX_PREFIX_VALUE:
        raise ValueError(f"OUI out of range: {value!r}")
    return p


@dataclass(frozen=True)
class OuiEntry:
    prefix: str
    vendor_name: str
    vendor_alternate_name: str = ""

    @classmethod
    def create(cls, prefix: str, vendor_name: str, vendor_alternate_name: str = "") -> "OuiEntry":
        return cls(
            prefix=parse_prefix(prefix),
            vendor_name=str(vendor_name).strip(),
            vendor_alternate_name=str(vendor_alternate_name).strip(),
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "oui": self.prefix,
            "vendor_name": self.vendor_name,
            "vendor_alternate_name": self.vendor_alternate_name,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OuiEntry":
        return cls.create(
            str(data.get("oui") or ""),
            str(data.get("vendor_name") or ""),
            str(data.get("vendor_alternate_name") or ""),
        )

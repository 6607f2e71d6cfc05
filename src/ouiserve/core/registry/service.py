from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from ..addressing import prefix_from_address
from ..entries import OuiEntry

logger = logging.getLogger(__name__)


class OuiRegistry:
    """Immutable, ordered table of OUI entries.

    Built once at startup and shared read-only by every request, so lookups
    need no locking.

    Duplicate prefixes: the first entry wins. Later duplicates are dropped
    from both the ordered view and the mapping view so the two always agree.
    """

    __slots__ = ("_entries", "_by_prefix")

    def __init__(self, entries: Iterable[OuiEntry] = ()) -> None:
        ordered: list[OuiEntry] = []
        by_prefix: dict[str, OuiEntry] = {}
        for entry in entries:
            existing = by_prefix.get(entry.prefix)
            if existing is not None:
                logger.warning(
                    "Duplicate OUI %s (%r); keeping first entry (%r)",
                    entry.prefix,
                    entry.vendor_name,
                    existing.vendor_name,
                )
                continue
            by_prefix[entry.prefix] = entry
            ordered.append(entry)

        self._entries: tuple[OuiEntry, ...] = tuple(ordered)
        self._by_prefix: Mapping[str, OuiEntry] = MappingProxyType(by_prefix)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OuiEntry]:
        return iter(self._entries)

    def __contains__(self, prefix: object) -> bool:
        return isinstance(prefix, str) and self.get(prefix) is not None

    def __repr__(self) -> str:
        return f"OuiRegistry(entries={len(self._entries)})"

    @property
    def by_prefix(self) -> Mapping[str, OuiEntry]:
        """Read-only prefix -> entry view over the same entries."""
        return self._by_prefix

    def list_all(self) -> list[OuiEntry]:
        return list(self._entries)

    def get(self, prefix: Any) -> OuiEntry | None:
        """Exact, case-insensitive lookup. Returns None when nothing matches."""
        if prefix is None:
            return None
        return self._by_prefix.get(str(prefix).strip().upper())

    def lookup(self, address: Any) -> OuiEntry | None:
        """Return the entry owning a full hardware address, or None.

        Malformed addresses are not an error; they simply do not match.
        """

        prefix = prefix_from_address(address)
        if prefix is None:
            return None
        return self.get(prefix)

    def resolve(self, address: Any) -> str | None:
        """Resolve a full hardware address to its vendor name, or None."""
        entry = self.lookup(address)
        if entry is None:
            return None
        return entry.vendor_name

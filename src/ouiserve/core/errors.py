from __future__ import annotations


class RegistryLoadError(RuntimeError):
    """Raised when the registry source file cannot be read at all.

    The service cannot start without its data set, so callers at startup
    should let this propagate (or exit) rather than serve an empty table.
    """

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Unable to load OUI registry from {source}: {reason}")
        self.source = source
        self.reason = reason

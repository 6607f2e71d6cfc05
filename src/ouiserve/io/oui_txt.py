from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

from ..core.entries import OuiEntry
from ..core.errors import RegistryLoadError
from ..core.registry import OuiRegistry

logger = logging.getLogger(__name__)

# One IEEE registry record spans two consecutive lines:
#
#   AC-DE-48   (hex)		Private
#   ACDE48     (base 16)		Private
#
# The base-16 token is matched loosely (letters, digits and inner spaces) so
# that bad prefixes reach validation and get reported instead of vanishing.
_RECORD_RE = re.compile(
    r"^[ \t]*(?P<hex>[0-9A-Za-z]{2}(?:-[0-9A-Za-z]{2}){2})[ \t]+\(hex\)[ \t]*(?P<vendor_name>[^\r\n]*)\r?\n"
    r"[ \t]*(?P<oui>[0-9A-Za-z][0-9A-Za-z ]*?)[ \t]+\(base 16\)[ \t]*(?P<vendor_alternate_name>[^\r\n]*)",
    re.MULTILINE,
)


def parse_oui_records(text: str) -> Iterator[OuiEntry]:
    """Yield entries for every well-formed two-line record, in source order.

    Records whose base-16 prefix does not validate are logged and skipped.
    Duplicates are not filtered here; see `OuiRegistry`.
    """

    for match in _RECORD_RE.finditer(text):
        raw_oui = match.group("oui")
        try:
            entry = OuiEntry.create(
                raw_oui,
                match.group("vendor_name"),
                match.group("vendor_alternate_name"),
            )
        except ValueError as ex:
            line = text.count("\n", 0, match.start()) + 1
            logger.warning("Skipping malformed OUI record at line %d: %s", line, ex)
            continue
        yield entry


def parse_oui_text(text: str) -> OuiRegistry:
    """Parse registry text (the IEEE `oui.txt` layout) into an `OuiRegistry`."""

    logger.info("Attempting to load OUIs and build lookup table")
    registry = OuiRegistry(parse_oui_records(text))
    logger.info("Finished loading OUI lookup table, %d OUIs loaded", len(registry))
    return registry


def load_oui_file(path: str | Path) -> OuiRegistry:
    """Load the registry from a local `oui.txt` file.

    Raises RegistryLoadError if the file is missing or unreadable. Individual
    malformed records never abort the load.
    """

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError as ex:
        raise RegistryLoadError(str(p), "file not found") from ex
    except OSError as ex:
        raise RegistryLoadError(str(p), ex.strerror or str(ex)) from ex

    logger.info("Read %d bytes from %s", len(text), p)
    return parse_oui_text(text)

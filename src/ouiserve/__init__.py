from __future__ import annotations

from .core.entries import OuiEntry
from .core.errors import RegistryLoadError
from .core.registry import OuiRegistry
from .io.oui_txt import load_oui_file, parse_oui_text
from .runtime.server import OuiServer, run
from .sdk.client import OuiClient

__version__ = "0.1.0"

__all__ = [
    "run",
    "OuiServer",
    "OuiClient",
    "OuiEntry",
    "OuiRegistry",
    "RegistryLoadError",
    "load_oui_file",
    "parse_oui_text",
    "__version__",
]

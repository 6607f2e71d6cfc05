from __future__ import annotations

from .addressing import ADDRESS_LENGTH, normalize_address, normalize_prefix, prefix_from_address
from .entries import PREFIX_LENGTH, OuiEntry, parse_prefix
from .errors import RegistryLoadError
from .registry import OuiRegistry

__all__ = [
    "ADDRESS_LENGTH",
    "PREFIX_LENGTH",
    "OuiEntry",
    "OuiRegistry",
    "RegistryLoadError",
    "normalize_address",
    "normalize_prefix",
    "parse_prefix",
    "prefix_from_address",
]

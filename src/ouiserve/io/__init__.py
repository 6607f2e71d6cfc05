from __future__ import annotations

from .oui_txt import load_oui_file, parse_oui_records, parse_oui_text

__all__ = ["load_oui_file", "parse_oui_records", "parse_oui_text"]

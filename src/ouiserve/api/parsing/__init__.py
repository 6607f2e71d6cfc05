from __future__ import annotations

from .params import parse_origins, parse_prefix_param

__all__ = ["parse_prefix_param", "parse_origins"]

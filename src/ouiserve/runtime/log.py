from __future__ import annotations

import logging

from uvicorn.config import LOG_LEVELS

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_log_level(value: str) -> str:
    """Return a level name uvicorn accepts (critical/error/warning/info/debug/trace)."""
    name = str(value).strip().lower()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {value!r}. Use one of: {', '.join(LOG_LEVELS)}")
    return name


def configure_logging(level: str = "info") -> None:
    resolved = LOG_LEVELS[parse_log_level(level)]
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("ouiserve").setLevel(resolved)
